# path: route-hazard-map/routemap/services/hazard_overlay.py

from __future__ import annotations

from typing import List, Optional, Sequence

from routemap.models.hazard_models import HazardRecord, VisualizationMode


class HazardOverlay:
    def __init__(self) -> None:
        self._records: Optional[List[HazardRecord]] = None
        self._mode = VisualizationMode.NONE

    def set_records(self, records: Optional[Sequence[HazardRecord]]) -> None:
        self._records = list(records) if records is not None else None
        if not self._records:
            self._mode = VisualizationMode.NONE

    def set_mode(self, mode: VisualizationMode) -> None:
        # Stored as requested; a later set_records() with nothing can still reset it.
        self._mode = VisualizationMode(mode)

    def active_mode(self) -> VisualizationMode:
        return self._mode

    def records(self) -> List[HazardRecord]:
        return list(self._records) if self._records else []
