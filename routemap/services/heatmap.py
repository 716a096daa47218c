# path: route-hazard-map/routemap/services/heatmap.py

from __future__ import annotations

from typing import List, Sequence

from pydantic import BaseModel, Field

from routemap.config import HEATMAP_CELLS
from routemap.models.hazard_models import HazardRecord
from routemap.models.route_models import Coordinate
from routemap.services.surface import RenderingSurface
from routemap.utils.geo import bounding_box


class HeatmapGrid(BaseModel):
    """Hazard counts binned over the visible bounding box, row 0 = north."""

    min: Coordinate
    max: Coordinate
    cells: int = Field(gt=0)
    counts: List[List[int]]
    peak: int = Field(ge=0)


class GridHeatmapGenerator:
    """Stand-in heatmap source for the HTTP layer; a UI injects a real image generator."""

    def __init__(self, cells: int = HEATMAP_CELLS):
        if cells <= 0:
            raise ValueError(f"heatmap cells must be positive, got {cells}")
        self.cells = cells

    def generate_heatmap_image(self, surface: RenderingSurface, records: Sequence[HazardRecord]) -> HeatmapGrid:
        width, height = surface.viewport_size()
        corners = [
            surface.project_screen_point_to_coordinate(p)
            for p in [(0, 0), (0, height), (width, 0), (width, height)]
        ]
        lo, hi = bounding_box(corners)

        n = self.cells
        counts = [[0] * n for _ in range(n)]
        lat_span = (hi.lat - lo.lat) or 1e-12
        lng_span = (hi.lng - lo.lng) or 1e-12
        for r in records:
            if not (lo.lat <= r.lat <= hi.lat and lo.lng <= r.lng <= hi.lng):
                continue
            row = min(int((hi.lat - r.lat) / lat_span * n), n - 1)
            col = min(int((r.lng - lo.lng) / lng_span * n), n - 1)
            counts[row][col] += 1

        return HeatmapGrid(
            min=lo,
            max=hi,
            cells=n,
            counts=counts,
            peak=max(max(row) for row in counts),
        )
