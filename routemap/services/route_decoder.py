# path: route-hazard-map/routemap/services/route_decoder.py

from __future__ import annotations

from typing import Any, List, Optional
import logging

from routemap.models.route_models import (
    Coordinate,
    DecodedRoute,
    Leg,
    RawDirectionsResponse,
    RawRoute,
    RouteAlternative,
)

logger = logging.getLogger(__name__)


def decode_route_response(raw: Any) -> DecodedRoute:
    """
    Decode a routing-service response into a DecodedRoute.

    Never raises on input shape: a null response, or any missing or malformed
    field, decodes as absent at that level.
    """
    if raw is None:
        return DecodedRoute()
    if not isinstance(raw, dict):
        logger.debug("Route response is %s, not an object; treating as empty", type(raw).__name__)
        return DecodedRoute()

    response = RawDirectionsResponse.model_validate(raw)
    alternatives = tuple(_decode_alternative(i, r) for i, r in enumerate(response.routes))
    return DecodedRoute(alternatives=alternatives)


def _decode_alternative(i: int, raw: RawRoute) -> RouteAlternative:
    path = raw.overview_polyline.points if raw.overview_polyline is not None else None
    if path is None:
        logger.debug("Route %d has no overview polyline", i)

    legs = []
    for leg in raw.legs:
        end = None
        if leg.end_location is not None:
            end = Coordinate(lat=leg.end_location.lat, lng=leg.end_location.lng)
        legs.append(Leg(end_location=end))
    return RouteAlternative(encoded_path=path, legs=tuple(legs))


def encoded_paths(route: Optional[DecodedRoute]) -> List[str]:
    if route is None:
        return []
    return [alt.encoded_path for alt in route.alternatives if alt.encoded_path is not None]


def end_locations(route: Optional[DecodedRoute]) -> List[Coordinate]:
    # Flattened in order: route0.leg0, route0.leg1, ..., route1.leg0, ...
    if route is None:
        return []
    return [
        leg.end_location
        for alt in route.alternatives
        for leg in alt.legs
        if leg.end_location is not None
    ]
