# path: route-hazard-map/routemap/utils/geo.py

from __future__ import annotations

from typing import Iterable, List, Tuple
import math

from routemap.models.route_models import Coordinate


EARTH_RADIUS_M = 6371000.0
TILE_SIZE = 256


def bounding_box(corners: Iterable[Coordinate]) -> Tuple[Coordinate, Coordinate]:
    # Per-axis min/max; the result need not be one of the corners.
    corners = list(corners)
    if not corners:
        raise ValueError("bounding_box needs at least one corner")
    lats = [c.lat for c in corners]
    lngs = [c.lng for c in corners]
    return (
        Coordinate(lat=min(lats), lng=min(lngs)),
        Coordinate(lat=max(lats), lng=max(lngs)),
    )


def haversine_m(a: Coordinate, b: Coordinate) -> float:
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    dphi = math.radians(b.lat - a.lat)
    dlmb = math.radians(b.lng - a.lng)

    s = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(s))


def latlng_to_world_px(lat: float, lng: float, zoom: float) -> Tuple[float, float]:
    """Web-Mercator world pixel coordinates at a (possibly fractional) zoom."""
    n = 2 ** zoom
    x = (lng + 180.0) / 360.0 * n * TILE_SIZE
    lat_rad = math.radians(lat)
    y = (1.0 - math.asinh(math.tan(lat_rad)) / math.pi) / 2.0 * n * TILE_SIZE
    return x, y


def world_px_to_latlng(x: float, y: float, zoom: float) -> Tuple[float, float]:
    n = 2 ** zoom
    # Wrap across the antimeridian so lng stays in [-180, 180).
    lng = (x / (n * TILE_SIZE) * 360.0) % 360.0 - 180.0
    lat_rad = math.atan(math.sinh(math.pi * (1 - 2 * y / (n * TILE_SIZE))))
    return math.degrees(lat_rad), lng


class WebMercatorViewport:
    """Screen <-> geo projection for a north-up or rotated map camera.

    Screen points are ``(x, y)`` pixels with the origin at the top-left of
    the viewport. ``bearing`` is the compass direction at the top of the
    screen, in degrees clockwise from north.
    """

    def __init__(self, center: Coordinate, zoom: float, bearing: float, width: int, height: int):
        self.center = center
        self.zoom = zoom
        self.bearing = bearing
        self.width = width
        self.height = height

    def project(self, point: Tuple[float, float]) -> Coordinate:
        sx, sy = point
        dx = sx - self.width / 2.0
        dy = sy - self.height / 2.0

        # Undo the camera rotation: screen-up points at `bearing`.
        theta = math.radians(self.bearing)
        wx = dx * math.cos(theta) - dy * math.sin(theta)
        wy = dx * math.sin(theta) + dy * math.cos(theta)

        cx, cy = latlng_to_world_px(self.center.lat, self.center.lng, self.zoom)
        lat, lng = world_px_to_latlng(cx + wx, cy + wy, self.zoom)
        return Coordinate(lat=lat, lng=lng)

    def corners(self) -> List[Tuple[float, float]]:
        return [
            (0.0, 0.0),
            (0.0, float(self.height)),
            (float(self.width), 0.0),
            (float(self.width), float(self.height)),
        ]
