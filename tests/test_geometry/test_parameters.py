import math

import numpy as np
import numpy.testing as npt
import pytest

from thicklinepy.constants import MSG_COINCIDENT
from thicklinepy.exceptions import DegenerateGeometryError
from thicklinepy.feature import FeatureType
from thicklinepy.parameters import ThickLineInputs, derive_parameters


def test_derive_horizontal_line_without_features():
    params = derive_parameters(ThickLineInputs(a=(0, 0), b=(10, 0), width=2))

    assert params.length == 10.0
    assert params.direction == (1.0, 0.0)
    assert params.normal == (0.0, 1.0)
    assert params.a_ext == (0.0, 0.0)
    assert params.b_ext == (10.0, 0.0)
    assert params.a_base == (0.0, 0.0)
    assert params.b_base == (10.0, 0.0)
    assert params.body_length == 10.0


def test_leads_push_tips_outward():
    params = derive_parameters(
        ThickLineInputs(a=(0, 0), b=(0, 5), width=1, lead_a=1.5, lead_b=2.0)
    )

    assert params.direction == (0.0, 1.0)
    assert params.normal == (-1.0, 0.0)
    assert params.a_ext == (0.0, -1.5)
    assert params.b_ext == (0.0, 7.0)
    assert math.isclose(params.body_length, 8.5)


def test_feature_lengths_pull_bases_inward():
    params = derive_parameters(
        ThickLineInputs(
            a=(0, 0),
            b=(10, 0),
            width=2,
            lead_a=1,
            feature_a="Arrow",
            feature_a_width=4,
            feature_a_length=2,
            feature_b=FeatureType.T,
            feature_b_width=3,
            feature_b_length=1,
        )
    )

    assert params.a_ext == (-1.0, 0.0)
    assert params.a_base == (1.0, 0.0)
    assert params.b_ext == (10.0, 0.0)
    assert params.b_base == (9.0, 0.0)
    assert params.feature_a is FeatureType.ARROW
    assert params.feature_b is FeatureType.T


def test_inactive_feature_size_is_ignored():
    # A stale length left over from a previous terminator must not shorten the body
    params = derive_parameters(
        ThickLineInputs(
            a=(0, 0),
            b=(10, 0),
            width=2,
            feature_a=FeatureType.NONE,
            feature_a_width=7,
            feature_a_length=3,
        )
    )

    assert params.a_base == (0.0, 0.0)
    assert params.feature_a_length == 0.0
    assert params.feature_a_width == 0.0
    # Raw inputs are kept untouched
    assert params.inputs.feature_a_length == 3.0


def test_diagonal_direction_is_unit_length():
    params = derive_parameters(ThickLineInputs(a=(1, 1), b=(4, 5), width=1))

    assert params.length == 5.0
    npt.assert_allclose(np.asarray(params.direction), [0.6, 0.8])
    npt.assert_allclose(np.asarray(params.normal), [-0.8, 0.6])
    assert math.isclose(params.direction.length(), 1.0)


@pytest.mark.parametrize("offset", [0.0, 1e-13, 5e-13])
def test_coincident_points_fail(offset):
    with pytest.raises(DegenerateGeometryError) as exc_info:
        derive_parameters(ThickLineInputs(a=(3, 3), b=(3 + offset, 3), width=1))
    assert str(exc_info.value) == MSG_COINCIDENT


def test_derivation_is_deterministic():
    inputs = ThickLineInputs(
        a=(0.1, 0.7), b=(13.3, -2.9), width=0.3, lead_a=0.2, feature_b="T",
        feature_b_width=0.5, feature_b_length=0.4,
    )
    first = derive_parameters(inputs)
    second = derive_parameters(inputs)

    for name in ("direction", "normal", "a_ext", "b_ext", "a_base", "b_base"):
        assert np.array_equal(np.asarray(getattr(first, name)), np.asarray(getattr(second, name)))
    assert first.length == second.length


def test_inputs_normalize_feature_names():
    inputs = ThickLineInputs(a=(0, 0), b=(1, 0), feature_a=" arrow ", feature_b=None)
    assert inputs.feature_a is FeatureType.ARROW
    assert inputs.feature_b is FeatureType.NONE

    with pytest.raises(ValueError):
        ThickLineInputs(a=(0, 0), b=(1, 0), feature_a="Circle")
