# path: route-hazard-map/routemap/services/map_renderer.py

from __future__ import annotations

import logging

from routemap.config import ROUTE_LINE_STYLE
from routemap.models.drawable_models import LineStyle, MarkerKind, ZIndex
from routemap.models.hazard_models import VisualizationMode
from routemap.services.hazard_overlay import HazardOverlay
from routemap.services.route_decoder import encoded_paths
from routemap.services.route_state import RouteState
from routemap.services.surface import HeatmapImageGenerator, RenderingSurface

logger = logging.getLogger(__name__)


class MapRenderer:
    """Full, synchronous redraw of route and hazard layers onto a surface.

    Every draw() clears the surface and repaints from RouteState and
    HazardOverlay; nothing is diffed against the previous frame. Z-order,
    lowest first: route lines, destination, waypoints, hazard icons, heatmap.
    """

    def __init__(
        self,
        surface: RenderingSurface,
        state: RouteState,
        overlay: HazardOverlay,
        heatmap: HeatmapImageGenerator,
        route_style: LineStyle = ROUTE_LINE_STYLE,
    ):
        self.surface = surface
        self.state = state
        self.overlay = overlay
        self.heatmap = heatmap
        self.route_style = route_style

    def draw(self) -> None:
        self.surface.clear_all_drawables()

        mode = self.overlay.active_mode()
        if mode == VisualizationMode.POINTS:
            self._draw_hazard_markers()
        elif mode == VisualizationMode.HEATMAP:
            self._draw_heatmap()

        if self.state.route is not None:
            self._draw_route()

        logger.debug(
            "draw: mode=%s route=%s destination=%s waypoints=%d",
            mode.value,
            self.state.route is not None,
            self.state.destination is not None,
            len(self.state.waypoints),
        )

    def _draw_hazard_markers(self) -> None:
        for record in self.overlay.records():
            self.surface.add_marker(record.position, MarkerKind.HAZARD, ZIndex.ICON)

    def _draw_heatmap(self) -> None:
        records = self.overlay.records()
        if not records:
            return

        camera = self.surface.current_camera()
        width, height = self.surface.viewport_size()
        center = self.surface.project_screen_point_to_coordinate((width / 2.0, height / 2.0))
        image = self.heatmap.generate_heatmap_image(self.surface, records)
        self.surface.add_ground_overlay(image, center, camera.zoom, camera.bearing, ZIndex.HEATMAP)

    def _draw_route(self) -> None:
        for path in encoded_paths(self.state.route):
            self.surface.add_line(path, self.route_style, ZIndex.ROUTE)

        if self.state.destination is not None:
            self.surface.add_marker(self.state.destination, MarkerKind.DESTINATION, ZIndex.DESTINATION)

        for waypoint in self.state.waypoints:
            self.surface.add_marker(waypoint, MarkerKind.WAYPOINT, ZIndex.WAYPOINT)
