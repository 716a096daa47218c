# path: route-hazard-map/routemap/services/route_state.py

from __future__ import annotations

from typing import List, Optional
import logging

from routemap.models.route_models import Coordinate, DecodedRoute
from routemap.services.route_decoder import end_locations
from routemap.utils.geo import haversine_m

logger = logging.getLogger(__name__)


class WaypointIndexError(IndexError):
    pass


class RouteState:
    """Destination and waypoints of the route being planned.

    The first point appended while no destination is set becomes the
    destination; every later point is a waypoint. Loading a route only ever
    moves the destination, waypoints are left alone.
    """

    def __init__(self) -> None:
        self.destination: Optional[Coordinate] = None
        self.waypoints: List[Coordinate] = []
        self.route: Optional[DecodedRoute] = None

    def set_from_decoded_route(self, route: Optional[DecodedRoute]) -> None:
        self.route = route
        if route is None:
            self.clear()
            return

        locations = end_locations(route)
        self.destination = locations[-1] if locations else None
        logger.debug("Destination set from route: %s", self.destination)

    def append_point(self, point: Coordinate) -> None:
        if self.destination is None:
            self.destination = point
        else:
            self.waypoints.append(point)

    def clear(self) -> None:
        self.destination = None
        self.waypoints = []

    remove_all_points = clear

    def remove_waypoint_at(self, index: int) -> Coordinate:
        self._check_index(index)
        return self.waypoints.pop(index)

    def replace_waypoint_at(self, index: int, point: Coordinate) -> None:
        self._check_index(index)
        self.waypoints[index] = point

    def find_waypoint_near(self, point: Coordinate, radius_m: float) -> Optional[int]:
        # First match in list order, not the closest one.
        for i, waypoint in enumerate(self.waypoints):
            if haversine_m(waypoint, point) <= radius_m:
                return i
        return None

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.waypoints):
            raise WaypointIndexError(
                f"waypoint index out of range: {index} (have {len(self.waypoints)})"
            )
