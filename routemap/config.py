import os
from pathlib import Path
from dotenv import load_dotenv

from routemap.models.drawable_models import LineStyle

# Always load .env from the project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

LOG_LEVEL = os.getenv("ROUTEMAP_LOG_LEVEL", "INFO")

# Projected screen points are not bit-identical to stored coordinates, so a
# dragged waypoint is found by distance rather than equality.
WAYPOINT_MATCH_RADIUS_M = float(os.getenv("ROUTEMAP_WAYPOINT_MATCH_RADIUS_M", "10.0"))

ROUTE_STROKE_WIDTH = float(os.getenv("ROUTEMAP_ROUTE_STROKE_WIDTH", "4.0"))
ROUTE_STROKE_COLOR = os.getenv("ROUTEMAP_ROUTE_STROKE_COLOR", "#2396e8")
ROUTE_LINE_STYLE = LineStyle(stroke_width=ROUTE_STROKE_WIDTH, stroke_color=ROUTE_STROKE_COLOR, tappable=False)

VIEWPORT_WIDTH = int(os.getenv("ROUTEMAP_VIEWPORT_WIDTH", "390"))
VIEWPORT_HEIGHT = int(os.getenv("ROUTEMAP_VIEWPORT_HEIGHT", "844"))
CAMERA_LAT = float(os.getenv("ROUTEMAP_CAMERA_LAT", "37.7749"))
CAMERA_LNG = float(os.getenv("ROUTEMAP_CAMERA_LNG", "-122.4194"))
CAMERA_ZOOM = float(os.getenv("ROUTEMAP_CAMERA_ZOOM", "14"))

HEATMAP_CELLS = int(os.getenv("ROUTEMAP_HEATMAP_CELLS", "16"))

APP_HOST = os.getenv("APP_HOST", "127.0.0.1")
APP_PORT = int(os.getenv("APP_PORT", "8000"))
