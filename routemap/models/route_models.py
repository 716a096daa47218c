# path: route-hazard-map/routemap/models/route_models.py

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)


def _absent_on_error(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    # Malformed optional sub-objects decode as absent instead of failing the parent.
    try:
        return handler(value)
    except ValidationError:
        return None


def _valid_items(model: type[BaseModel], value: Any) -> list:
    if not isinstance(value, list):
        return []
    items = []
    for item in value:
        try:
            items.append(model.model_validate(item))
        except ValidationError:
            continue
    return items


### Routing-service response (raw schema, lenient)


class RawLatLng(BaseModel):
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)


class RawOverviewPolyline(BaseModel):
    points: str


class RawLeg(BaseModel):
    end_location: Optional[RawLatLng] = None

    @field_validator("end_location", mode="wrap")
    @classmethod
    def lenient_end_location(cls, value: Any, handler: ValidatorFunctionWrapHandler):
        return _absent_on_error(value, handler)


class RawRoute(BaseModel):
    overview_polyline: Optional[RawOverviewPolyline] = None
    legs: List[RawLeg] = Field(default_factory=list)

    @field_validator("overview_polyline", mode="wrap")
    @classmethod
    def lenient_overview(cls, value: Any, handler: ValidatorFunctionWrapHandler):
        return _absent_on_error(value, handler)

    @field_validator("legs", mode="before")
    @classmethod
    def lenient_legs(cls, value: Any):
        return _valid_items(RawLeg, value)


class RawDirectionsResponse(BaseModel):
    routes: List[RawRoute] = Field(default_factory=list)

    @field_validator("routes", mode="before")
    @classmethod
    def lenient_routes(cls, value: Any):
        return _valid_items(RawRoute, value)


### Decoded route (what the map actually draws)


class Leg(BaseModel):
    model_config = ConfigDict(frozen=True)

    end_location: Optional[Coordinate] = None


class RouteAlternative(BaseModel):
    model_config = ConfigDict(frozen=True)

    encoded_path: Optional[str] = None
    legs: tuple[Leg, ...] = ()


class DecodedRoute(BaseModel):
    model_config = ConfigDict(frozen=True)

    alternatives: tuple[RouteAlternative, ...] = ()
