# path: route-hazard-map/routemap/models/hazard_models.py

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict

from routemap.models.route_models import Coordinate


class VisualizationMode(str, Enum):
    NONE = "none"
    POINTS = "points"
    HEATMAP = "heatmap"


class HazardRecord(BaseModel):
    # Category fields (type, date, description, ...) ride along untouched.
    model_config = ConfigDict(extra="allow", frozen=True)

    id: Union[int, str]
    lat: float
    lng: float

    @property
    def position(self) -> Coordinate:
        return Coordinate(lat=self.lat, lng=self.lng)
