# path: route-hazard-map/routemap/models/drawable_models.py

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from routemap.models.route_models import Coordinate


class MarkerKind(str, Enum):
    DESTINATION = "destination"
    WAYPOINT = "waypoint"
    HAZARD = "hazard"


class ZIndex(IntEnum):
    """Paint order of map layers, lowest first."""

    ROUTE = 1
    DESTINATION = 2
    WAYPOINT = 3
    ICON = 4
    HEATMAP = 5


class LineStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    stroke_width: float = Field(gt=0)
    stroke_color: str
    tappable: bool = False


class Camera(BaseModel):
    model_config = ConfigDict(frozen=True)

    center: Coordinate
    zoom: float = Field(ge=0)
    bearing: float = 0.0


DrawOp = Literal["clear", "line", "marker", "ground_overlay"]


class DrawCall(BaseModel):
    op: DrawOp
    z_order: Optional[int] = None
    path: Optional[str] = None
    style: Optional[LineStyle] = None
    position: Optional[Coordinate] = None
    kind: Optional[MarkerKind] = None
    image: Optional[Any] = None
    zoom_level: Optional[float] = None
    bearing: Optional[float] = None
