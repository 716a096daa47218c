import pytest

from routemap import (
    Camera,
    Coordinate,
    HazardRecord,
    MapSession,
    RecordingSurface,
)


class StubHeatmap:
    """Returns a fixed token and remembers what it was asked to render."""

    def __init__(self):
        self.requests = []

    def generate_heatmap_image(self, surface, records):
        self.requests.append(list(records))
        return "heatmap-image"


@pytest.fixture
def directions_response():
    """Two alternatives; the last leg of the last route ends at (3, 3)."""
    return {
        "routes": [
            {
                "overview_polyline": {"points": "_p~iF~ps|U_ulLnnqC"},
                "legs": [{"end_location": {"lat": 1.0, "lng": 1.0}}],
            },
            {
                "overview_polyline": {"points": "_mqNvxq`@"},
                "legs": [
                    {"end_location": {"lat": 2.0, "lng": 2.0}},
                    {"end_location": {"lat": 3.0, "lng": 3.0}},
                ],
            },
        ]
    }


@pytest.fixture
def hazards():
    return [
        HazardRecord(id=1, lat=37.775, lng=-122.419, category="theft"),
        HazardRecord(id=2, lat=37.776, lng=-122.418, category="assault"),
    ]


@pytest.fixture
def surface():
    return RecordingSurface(
        camera=Camera(center=Coordinate(lat=37.7749, lng=-122.4194), zoom=14, bearing=0.0),
        width=400,
        height=800,
    )


@pytest.fixture
def heatmap():
    return StubHeatmap()


@pytest.fixture
def session(surface, heatmap):
    return MapSession(surface, heatmap)
