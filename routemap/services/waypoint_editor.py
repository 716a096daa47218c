# path: route-hazard-map/routemap/services/waypoint_editor.py

from __future__ import annotations

from typing import Optional
import logging

from routemap.config import WAYPOINT_MATCH_RADIUS_M
from routemap.models.route_models import Coordinate
from routemap.services.route_state import RouteState

logger = logging.getLogger(__name__)


class WaypointEditor:
    """
    Single-slot drag session over RouteState.waypoints.

    Idle --start(p)--> Editing(p) --end(q)--> Idle
    A second start() while editing replaces the original point.
    """

    def __init__(self, state: RouteState, match_radius_m: float = WAYPOINT_MATCH_RADIUS_M):
        self.state = state
        self.match_radius_m = match_radius_m
        self.original_point: Optional[Coordinate] = None

    def is_active(self) -> bool:
        return self.original_point is not None

    def start(self, point: Coordinate) -> None:
        self.original_point = point

    def cancel(self) -> None:
        self.original_point = None

    def end(self, point: Coordinate) -> Optional[int]:
        """Move the dragged waypoint to `point`; returns its index, or None if nothing moved."""
        if self.original_point is None:
            return None

        original = self.original_point
        self.original_point = None

        index = self.state.find_waypoint_near(original, self.match_radius_m)
        if index is None:
            # Known gap: the dragged point is dropped, no waypoint is created.
            logger.debug(
                "No waypoint within %.1f m of %s; dropping %s", self.match_radius_m, original, point
            )
            return None

        self.state.replace_waypoint_at(index, point)
        return index
