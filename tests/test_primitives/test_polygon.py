import math

import pytest

from thicklinepy.feature import FeatureType
from thicklinepy.primitives import Line, Polygon


def test_square_area_and_orientation():
    ccw = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
    cw = Polygon([(0, 0), (0, 1), (1, 1), (1, 0)])
    assert math.isclose(ccw.signed_area(), 1.0)
    assert math.isclose(cw.signed_area(), -1.0)
    assert math.isclose(cw.area(), 1.0)


def test_edges_close_the_outline():
    tri = Polygon([(0, 0), (4, 0), (0, 3)], role="feature_a", feature=FeatureType.ARROW)
    edges = tri.edges()
    assert len(edges) == 3
    assert edges[-1] == Line((0, 3), (0, 0))
    assert math.isclose(sum(edge.length() for edge in edges), 12.0)


def test_bounds():
    poly = Polygon([(-1, 2), (3, 2), (3, -4)])
    assert poly.bounds() == (-1.0, -4.0, 3.0, 2.0)


def test_is_simple_detects_bow_tie():
    assert Polygon([(0, 0), (2, 0), (2, 1), (0, 1)]).is_simple()
    assert not Polygon([(0, 0), (2, 1), (2, 0), (0, 1)]).is_simple()


def test_polygon_needs_three_corners():
    with pytest.raises(ValueError):
        Polygon([(0, 0), (1, 1)])


def test_to_json():
    poly = Polygon([(0, 0), (1, 0), (0, 1)], role="feature_b", feature=FeatureType.T)
    data = poly.to_json()
    assert data["role"] == "feature_b"
    assert data["feature"] == "T"
    assert data["points"][1] == {"x": 1.0, "y": 0.0}
