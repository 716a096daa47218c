# path: route-hazard-map/routemap/services/map_session.py

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple
import logging

from routemap.config import WAYPOINT_MATCH_RADIUS_M
from routemap.models.hazard_models import HazardRecord, VisualizationMode
from routemap.models.route_models import Coordinate
from routemap.services.hazard_overlay import HazardOverlay
from routemap.services.map_renderer import MapRenderer
from routemap.services.route_decoder import decode_route_response
from routemap.services.route_state import RouteState
from routemap.services.surface import HeatmapImageGenerator, RenderingSurface
from routemap.services.waypoint_editor import WaypointEditor
from routemap.utils.geo import bounding_box

logger = logging.getLogger(__name__)


class MapSession:
    """
    Route, hazard and editing state for one map view.

    Constructed and owned by the UI composition layer; every collaborator is
    injected so each view (or test) gets its own isolated instance.
    """

    def __init__(
        self,
        surface: RenderingSurface,
        heatmap: HeatmapImageGenerator,
        match_radius_m: float = WAYPOINT_MATCH_RADIUS_M,
    ):
        self.surface = surface
        self.state = RouteState()
        self.editor = WaypointEditor(self.state, match_radius_m=match_radius_m)
        self.overlay = HazardOverlay()
        self.renderer = MapRenderer(surface, self.state, self.overlay, heatmap)

    ### route

    def set_route_response(self, raw: Optional[Any]) -> None:
        if raw is None:
            self.state.set_from_decoded_route(None)
            return
        route = decode_route_response(raw)
        self.state.set_from_decoded_route(route)
        logger.info(
            "Loaded route: %d alternative(s), destination=%s",
            len(route.alternatives),
            self.state.destination,
        )

    def append_point(self, point: Coordinate) -> None:
        self.state.append_point(point)

    def remove_all_points(self) -> None:
        self.state.clear()

    def remove_waypoint_at(self, index: int) -> Coordinate:
        return self.state.remove_waypoint_at(index)

    ### waypoint dragging

    def start_moving_waypoint(self, point: Coordinate) -> None:
        self.editor.start(point)

    def end_moving_waypoint(self, point: Coordinate) -> Optional[int]:
        return self.editor.end(point)

    def is_editing_now(self) -> bool:
        return self.editor.is_active()

    ### hazards

    def set_hazards(self, records: Optional[Sequence[HazardRecord]]) -> None:
        self.overlay.set_records(records)

    def set_visualization_mode(self, mode: VisualizationMode) -> None:
        self.overlay.set_mode(mode)

    ### viewport

    def viewport_bounds(self) -> Tuple[Coordinate, Coordinate]:
        width, height = self.surface.viewport_size()
        corners = [
            self.surface.project_screen_point_to_coordinate(p)
            for p in [(0, 0), (0, height), (width, 0), (width, height)]
        ]
        return bounding_box(corners)

    def minimum_coordinate(self) -> Coordinate:
        return self.viewport_bounds()[0]

    def maximum_coordinate(self) -> Coordinate:
        return self.viewport_bounds()[1]

    def draw(self) -> None:
        self.renderer.draw()
