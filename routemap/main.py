# path: route-hazard-map/routemap/main.py

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from routemap import config, logging_config
from routemap.api.routes.map import router as map_router
from routemap.models.drawable_models import Camera
from routemap.models.route_models import Coordinate
from routemap.services.heatmap import GridHeatmapGenerator
from routemap.services.map_session import MapSession
from routemap.services.surface import RecordingSurface


def create_app(session: Optional[MapSession] = None) -> FastAPI:
    logging_config.configure(config.LOG_LEVEL)

    if session is None:
        surface = RecordingSurface(
            camera=Camera(
                center=Coordinate(lat=config.CAMERA_LAT, lng=config.CAMERA_LNG),
                zoom=config.CAMERA_ZOOM,
            ),
            width=config.VIEWPORT_WIDTH,
            height=config.VIEWPORT_HEIGHT,
        )
        session = MapSession(surface, GridHeatmapGenerator())

    app = FastAPI(title="route-hazard-map")
    app.state.session = session
    app.include_router(map_router)
    return app


app = create_app()


def serve() -> None:
    import uvicorn

    uvicorn.run("routemap.main:app", host=config.APP_HOST, port=config.APP_PORT)


if __name__ == "__main__":
    serve()
