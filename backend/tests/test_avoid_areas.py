"""Tests for avoid polygon normalization."""

import pytest
from shapely.geometry import Polygon

from routeparams.core.exceptions import InvalidJSONFormatException, ParameterValueException
from routeparams.services.requests import RouteRequestHandler


def square(x: float, y: float, size: float = 0.01) -> list:
    """Closed square ring with its lower-left corner at (x, y)."""
    return [
        [x, y],
        [x + size, y],
        [x + size, y + size],
        [x, y + size],
        [x, y],
    ]


class TestConvertAvoidAreas:
    """Tests for GeoJSON Polygon / MultiPolygon conversion."""

    @pytest.fixture
    def handler(self):
        return RouteRequestHandler()

    def test_polygon_yields_single_entry(self, handler):
        geojson = {"type": "Polygon", "coordinates": [square(8.68, 49.41)]}

        areas = handler.convert_avoid_areas(geojson)

        assert len(areas) == 1
        assert isinstance(areas[0], Polygon)
        assert areas[0].bounds == pytest.approx((8.68, 49.41, 8.69, 49.42))

    def test_polygon_hole_is_kept(self, handler):
        outer = square(0.0, 0.0, 1.0)
        hole = square(0.25, 0.25, 0.5)

        areas = handler.convert_avoid_areas({"type": "Polygon", "coordinates": [outer, hole]})

        assert len(areas[0].interiors) == 1
        assert areas[0].area == pytest.approx(0.75)

    def test_multipolygon_expands_in_member_order(self, handler):
        """A 3-member MultiPolygon yields 3 polygons in the same order."""
        origins = [(8.70, 49.40), (8.60, 49.45), (8.65, 49.30)]
        geojson = {
            "type": "MultiPolygon",
            "coordinates": [[square(x, y)] for x, y in origins],
        }

        areas = handler.convert_avoid_areas(geojson)

        assert len(areas) == 3
        for polygon, (x, y) in zip(areas, origins):
            assert isinstance(polygon, Polygon)
            assert polygon.bounds[:2] == pytest.approx((x, y))

    def test_loosely_typed_coordinates_are_re_encoded(self, handler):
        """Tuples and integers are accepted as coordinate values."""
        ring = ((0, 0), (2, 0), (2, 2), (0, 2), (0, 0))

        areas = handler.convert_avoid_areas({"type": "Polygon", "coordinates": (ring,)})

        assert areas[0].area == pytest.approx(4.0)

    def test_non_polygon_geometry_is_invalid_value(self, handler):
        with pytest.raises(ParameterValueException) as exc_info:
            handler.convert_avoid_areas({"type": "Point", "coordinates": [8.68, 49.41]})

        assert exc_info.value.code == 2003
        assert exc_info.value.parameters == [("avoid_polygons", None)]

    def test_linestring_is_invalid_value(self, handler):
        with pytest.raises(ParameterValueException):
            handler.convert_avoid_areas({
                "type": "LineString",
                "coordinates": [[8.68, 49.41], [8.69, 49.42]],
            })

    @pytest.mark.parametrize("payload", [
        {"type": "Polygon"},
        {"coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]]},
        {"type": "Polygon", "coordinates": [[["a", "b"], [1, 0], [1, 1], ["a", "b"]]]},
        {"type": "Polygon", "coordinates": [[[0, 0], [1, None], [1, 1], [0, 0]]]},
        {"type": 7, "coordinates": []},
        {"type": "Polygon", "coordinates": [[[0, 0], [1, 0]]]},
        {"type": "Hexagon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]]},
        {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [float("nan"), 1], [0, 0]]]},
        {"type": "Polygon", "coordinates": [[[0, 0], [float("inf"), 0], [1, 1], [0, 0]]]},
        {"type": "Polygon", "coordinates": [[[0, 0], ["-Infinity", 0], [1, 1], [0, 0]]]},
        {"type": "Polygon", "coordinates": []},
        {"type": "MultiPolygon", "coordinates": []},
        "not-a-geometry",
        [],
    ])
    def test_malformed_payload_is_invalid_json(self, handler, payload):
        with pytest.raises(InvalidJSONFormatException) as exc_info:
            handler.convert_avoid_areas(payload)

        assert exc_info.value.code == 2000
        assert exc_info.value.parameters[0][0] == "avoid_polygons"
