# path: route-hazard-map/routemap/api/routes/map.py

from __future__ import annotations

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from pydantic import BaseModel

from routemap.models.drawable_models import DrawCall
from routemap.models.hazard_models import HazardRecord, VisualizationMode
from routemap.models.route_models import Coordinate
from routemap.services.map_session import MapSession
from routemap.services.route_state import WaypointIndexError

router = APIRouter(prefix="/map", tags=["map"])

# Handlers are async and never await: each one runs to completion on the event
# loop, so the shared session is never mutated or drawn from two threads.


class MapSnapshot(BaseModel):
    destination: Optional[Coordinate]
    waypoints: List[Coordinate]
    editing: bool
    mode: VisualizationMode
    hazard_count: int


class ModeRequest(BaseModel):
    mode: VisualizationMode


class EditEndResponse(BaseModel):
    moved_index: Optional[int]
    snapshot: MapSnapshot


class BoundsResponse(BaseModel):
    min: Coordinate
    max: Coordinate


async def get_session(request: Request) -> MapSession:
    return request.app.state.session


def _snapshot(session: MapSession) -> MapSnapshot:
    return MapSnapshot(
        destination=session.state.destination,
        waypoints=list(session.state.waypoints),
        editing=session.is_editing_now(),
        mode=session.overlay.active_mode(),
        hazard_count=len(session.overlay.records()),
    )


@router.get("", response_model=MapSnapshot)
async def get_map(session: MapSession = Depends(get_session)) -> MapSnapshot:
    return _snapshot(session)


@router.put("/route", response_model=MapSnapshot)
async def put_route(raw: Any = Body(default=None), session: MapSession = Depends(get_session)) -> MapSnapshot:
    # The body is the routing service's response as fetched; null clears the route.
    session.set_route_response(raw)
    return _snapshot(session)


@router.post("/points", response_model=MapSnapshot)
async def append_point(point: Coordinate, session: MapSession = Depends(get_session)) -> MapSnapshot:
    session.append_point(point)
    return _snapshot(session)


@router.delete("/points", response_model=MapSnapshot)
async def remove_all_points(session: MapSession = Depends(get_session)) -> MapSnapshot:
    session.remove_all_points()
    return _snapshot(session)


@router.delete("/waypoints/{index}", response_model=MapSnapshot)
async def remove_waypoint(index: int, session: MapSession = Depends(get_session)) -> MapSnapshot:
    try:
        session.remove_waypoint_at(index)
    except WaypointIndexError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return _snapshot(session)


@router.post("/editing/start", response_model=MapSnapshot)
async def start_editing(point: Coordinate, session: MapSession = Depends(get_session)) -> MapSnapshot:
    session.start_moving_waypoint(point)
    return _snapshot(session)


@router.post("/editing/end", response_model=EditEndResponse)
async def end_editing(point: Coordinate, session: MapSession = Depends(get_session)) -> EditEndResponse:
    moved = session.end_moving_waypoint(point)
    return EditEndResponse(moved_index=moved, snapshot=_snapshot(session))


@router.put("/hazards", response_model=MapSnapshot)
async def put_hazards(
    records: Optional[List[HazardRecord]] = Body(default=None),
    session: MapSession = Depends(get_session),
) -> MapSnapshot:
    session.set_hazards(records)
    return _snapshot(session)


@router.put("/mode", response_model=MapSnapshot)
async def put_mode(req: ModeRequest, session: MapSession = Depends(get_session)) -> MapSnapshot:
    session.set_visualization_mode(req.mode)
    return _snapshot(session)


@router.get("/bounds", response_model=BoundsResponse)
async def get_bounds(session: MapSession = Depends(get_session)) -> BoundsResponse:
    lo, hi = session.viewport_bounds()
    return BoundsResponse(min=lo, max=hi)


@router.get("/draw", response_model=List[DrawCall])
async def draw(session: MapSession = Depends(get_session)) -> List[DrawCall]:
    session.draw()
    return list(session.surface.calls)
