# path: route-hazard-map/routemap/services/surface.py

from __future__ import annotations

from typing import Any, List, Protocol, Sequence, Tuple

from routemap.models.drawable_models import Camera, DrawCall, LineStyle, MarkerKind
from routemap.models.hazard_models import HazardRecord
from routemap.models.route_models import Coordinate
from routemap.utils.geo import WebMercatorViewport

ScreenPoint = Tuple[float, float]


class RenderingSurface(Protocol):
    """The map view that owns layer compositing and projection."""

    def clear_all_drawables(self) -> None: ...

    def add_line(self, path: str, style: LineStyle, z_order: int) -> None: ...

    def add_marker(self, position: Coordinate, kind: MarkerKind, z_order: int) -> None: ...

    def add_ground_overlay(
        self, image: Any, position: Coordinate, zoom_level: float, bearing: float, z_order: int
    ) -> None: ...

    def project_screen_point_to_coordinate(self, point: ScreenPoint) -> Coordinate: ...

    def current_camera(self) -> Camera: ...

    def viewport_size(self) -> Tuple[int, int]: ...


class HeatmapImageGenerator(Protocol):
    def generate_heatmap_image(self, surface: RenderingSurface, records: Sequence[HazardRecord]) -> Any: ...


class RecordingSurface:
    """
    RenderingSurface that keeps the current drawables as DrawCall records.

    Used by the HTTP layer to expose what a real map view would paint, and by
    tests. Projection is Web-Mercator around the configured camera.
    """

    def __init__(self, camera: Camera, width: int, height: int):
        self.camera = camera
        self.width = width
        self.height = height
        self.calls: List[DrawCall] = []

    def clear_all_drawables(self) -> None:
        self.calls = [DrawCall(op="clear")]

    def add_line(self, path: str, style: LineStyle, z_order: int) -> None:
        self.calls.append(DrawCall(op="line", path=path, style=style, z_order=int(z_order)))

    def add_marker(self, position: Coordinate, kind: MarkerKind, z_order: int) -> None:
        self.calls.append(DrawCall(op="marker", position=position, kind=kind, z_order=int(z_order)))

    def add_ground_overlay(
        self, image: Any, position: Coordinate, zoom_level: float, bearing: float, z_order: int
    ) -> None:
        self.calls.append(
            DrawCall(
                op="ground_overlay",
                image=image,
                position=position,
                zoom_level=zoom_level,
                bearing=bearing,
                z_order=int(z_order),
            )
        )

    def project_screen_point_to_coordinate(self, point: ScreenPoint) -> Coordinate:
        return self._viewport().project(point)

    def current_camera(self) -> Camera:
        return self.camera

    def viewport_size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def move_camera(self, camera: Camera) -> None:
        self.camera = camera

    def _viewport(self) -> WebMercatorViewport:
        return WebMercatorViewport(
            center=self.camera.center,
            zoom=self.camera.zoom,
            bearing=self.camera.bearing,
            width=self.width,
            height=self.height,
        )
