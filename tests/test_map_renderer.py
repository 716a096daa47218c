"""Tests for draw ordering and layer composition."""

from unittest.mock import MagicMock

import pytest

from routemap import (
    Camera,
    Coordinate,
    HazardOverlay,
    MapRenderer,
    MarkerKind,
    RouteState,
    VisualizationMode,
    ZIndex,
    decode_route_response,
)
from routemap.config import ROUTE_LINE_STYLE


def _ops(surface):
    return [(c.op, c.kind, c.z_order) for c in surface.calls]


@pytest.fixture
def parts(surface, heatmap):
    state = RouteState()
    overlay = HazardOverlay()
    return state, overlay, MapRenderer(surface, state, overlay, heatmap)


class TestZOrder:
    def test_layer_order_is_fixed(self):
        assert ZIndex.ROUTE < ZIndex.DESTINATION < ZIndex.WAYPOINT < ZIndex.ICON < ZIndex.HEATMAP


class TestDraw:
    def test_empty_state_only_clears(self, parts, surface):
        _, _, renderer = parts
        renderer.draw()
        assert _ops(surface) == [("clear", None, None)]

    def test_route_destination_waypoints(self, parts, surface, directions_response):
        state, _, renderer = parts
        state.set_from_decoded_route(decode_route_response(directions_response))
        state.append_point(Coordinate(lat=5.0, lng=5.0))
        state.append_point(Coordinate(lat=6.0, lng=6.0))
        renderer.draw()

        assert _ops(surface) == [
            ("clear", None, None),
            ("line", None, ZIndex.ROUTE),
            ("line", None, ZIndex.ROUTE),
            ("marker", MarkerKind.DESTINATION, ZIndex.DESTINATION),
            ("marker", MarkerKind.WAYPOINT, ZIndex.WAYPOINT),
            ("marker", MarkerKind.WAYPOINT, ZIndex.WAYPOINT),
        ]
        lines = [c for c in surface.calls if c.op == "line"]
        assert [c.path for c in lines] == ["_p~iF~ps|U_ulLnnqC", "_mqNvxq`@"]
        assert all(c.style == ROUTE_LINE_STYLE and c.style.tappable is False for c in lines)
        assert surface.calls[3].position == Coordinate(lat=3.0, lng=3.0)
        assert [c.position for c in surface.calls[4:]] == [
            Coordinate(lat=5.0, lng=5.0),
            Coordinate(lat=6.0, lng=6.0),
        ]

    def test_points_without_route_are_not_drawn(self, parts, surface):
        state, _, renderer = parts
        state.append_point(Coordinate(lat=1.0, lng=1.0))
        state.append_point(Coordinate(lat=2.0, lng=2.0))
        renderer.draw()
        assert _ops(surface) == [("clear", None, None)]

    def test_route_without_destination_skips_marker(self, parts, surface):
        state, _, renderer = parts
        state.set_from_decoded_route(decode_route_response({"routes": [{"overview_polyline": {"points": "abc"}}]}))
        renderer.draw()
        assert _ops(surface) == [("clear", None, None), ("line", None, ZIndex.ROUTE)]

    def test_hazard_points(self, parts, surface, hazards):
        _, overlay, renderer = parts
        overlay.set_records(hazards)
        overlay.set_mode(VisualizationMode.POINTS)
        renderer.draw()

        markers = [c for c in surface.calls if c.op == "marker"]
        assert [(c.kind, c.z_order) for c in markers] == [(MarkerKind.HAZARD, ZIndex.ICON)] * 2
        assert [c.position for c in markers] == [h.position for h in hazards]

    def test_heatmap(self, parts, surface, heatmap, hazards):
        _, overlay, renderer = parts
        overlay.set_records(hazards)
        overlay.set_mode(VisualizationMode.HEATMAP)
        surface.move_camera(Camera(center=Coordinate(lat=37.7749, lng=-122.4194), zoom=15, bearing=30))
        renderer.draw()

        assert _ops(surface) == [("clear", None, None), ("ground_overlay", None, ZIndex.HEATMAP)]
        call = surface.calls[1]
        assert call.image == "heatmap-image"
        assert call.zoom_level == 15
        assert call.bearing == 30
        assert call.position.lat == pytest.approx(37.7749)
        assert call.position.lng == pytest.approx(-122.4194)
        assert heatmap.requests == [hazards]

    def test_heatmap_mode_without_records_draws_nothing(self, parts, surface, heatmap):
        _, overlay, renderer = parts
        overlay.set_mode(VisualizationMode.HEATMAP)
        renderer.draw()
        assert _ops(surface) == [("clear", None, None)]
        assert heatmap.requests == []

    def test_full_frame_call_order(self, parts, surface, hazards, directions_response):
        state, overlay, renderer = parts
        state.set_from_decoded_route(decode_route_response(directions_response))
        state.append_point(Coordinate(lat=5.0, lng=5.0))
        overlay.set_records(hazards)
        overlay.set_mode(VisualizationMode.POINTS)
        renderer.draw()
        assert [c.op for c in surface.calls] == ["clear", "marker", "marker", "line", "line", "marker", "marker"]


class TestIdempotence:
    def test_same_calls_each_draw(self, hazards, heatmap, directions_response):
        surface = MagicMock()
        surface.viewport_size.return_value = (400, 800)
        surface.project_screen_point_to_coordinate.return_value = Coordinate(lat=0.0, lng=0.0)
        surface.current_camera.return_value = Camera(center=Coordinate(lat=0.0, lng=0.0), zoom=12)

        state = RouteState()
        overlay = HazardOverlay()
        renderer = MapRenderer(surface, state, overlay, heatmap)
        state.set_from_decoded_route(decode_route_response(directions_response))
        state.append_point(Coordinate(lat=5.0, lng=5.0))
        overlay.set_records(hazards)
        overlay.set_mode(VisualizationMode.HEATMAP)

        renderer.draw()
        first = list(surface.mock_calls)
        surface.reset_mock(return_value=False)
        renderer.draw()
        assert surface.mock_calls == first
        assert surface.clear_all_drawables.call_count == 1

    def test_recording_surface_rebuilds(self, parts, surface, directions_response):
        state, _, renderer = parts
        state.set_from_decoded_route(decode_route_response(directions_response))
        renderer.draw()
        first = list(surface.calls)
        renderer.draw()
        assert surface.calls == first
