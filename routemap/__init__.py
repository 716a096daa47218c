"""Route, waypoint and hazard-overlay state for a map view."""

from .models.drawable_models import Camera, DrawCall, LineStyle, MarkerKind, ZIndex
from .models.hazard_models import HazardRecord, VisualizationMode
from .models.route_models import Coordinate, DecodedRoute, Leg, RouteAlternative
from .services.hazard_overlay import HazardOverlay
from .services.map_renderer import MapRenderer
from .services.map_session import MapSession
from .services.route_decoder import decode_route_response, encoded_paths, end_locations
from .services.route_state import RouteState, WaypointIndexError
from .services.surface import HeatmapImageGenerator, RecordingSurface, RenderingSurface
from .services.waypoint_editor import WaypointEditor
from .utils.geo import bounding_box, haversine_m

__all__ = [
    "Camera",
    "Coordinate",
    "DecodedRoute",
    "DrawCall",
    "HazardOverlay",
    "HazardRecord",
    "HeatmapImageGenerator",
    "Leg",
    "LineStyle",
    "MapRenderer",
    "MapSession",
    "MarkerKind",
    "RecordingSurface",
    "RenderingSurface",
    "RouteAlternative",
    "RouteState",
    "VisualizationMode",
    "WaypointEditor",
    "WaypointIndexError",
    "ZIndex",
    "bounding_box",
    "decode_route_response",
    "encoded_paths",
    "end_locations",
    "haversine_m",
]
