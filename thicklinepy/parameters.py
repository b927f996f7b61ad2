"""
Parameter records for thick line construction.

``ThickLineInputs`` holds the raw values picked and typed by the user.
``derive_parameters`` turns them into an immutable ``ThickLineParameters``
carrying the baseline direction, the tips after leads and the terminator base
points that the validator and the shape generator work from.
"""

import math
from dataclasses import dataclass
from typing import Union

from .cad_types import Vector2, VectorLike, as_vector
from .constants import DEFAULT_WIDTH_CM, EPS_COINCIDENT, MSG_COINCIDENT
from .exceptions import DegenerateGeometryError
from .feature import FeatureType


@dataclass
class ThickLineInputs:
    """Raw inputs for one thick line, in sketch units (cm).

    Attributes:
        a: Start point picked by the user (not yet extended by the lead)
        b: End point picked by the user
        width: Full width of the line body
        lead_a: Extension of the baseline beyond A
        lead_b: Extension of the baseline beyond B
        feature_a: Terminator drawn at A
        feature_a_width: Terminator width at A (ignored for ``NONE``)
        feature_a_length: Terminator length at A (ignored for ``NONE``)
        feature_b: Terminator drawn at B
        feature_b_width: Terminator width at B (ignored for ``NONE``)
        feature_b_length: Terminator length at B (ignored for ``NONE``)
    """

    a: VectorLike
    b: VectorLike
    width: float = DEFAULT_WIDTH_CM
    lead_a: float = 0.0
    lead_b: float = 0.0
    feature_a: Union[FeatureType, str] = FeatureType.NONE
    feature_a_width: float = 0.0
    feature_a_length: float = 0.0
    feature_b: Union[FeatureType, str] = FeatureType.NONE
    feature_b_width: float = 0.0
    feature_b_length: float = 0.0

    def __post_init__(self):
        self.a = as_vector(self.a)
        self.b = as_vector(self.b)
        self.feature_a = FeatureType.from_string(self.feature_a)
        self.feature_b = FeatureType.from_string(self.feature_b)
        self.width = float(self.width)
        self.lead_a = float(self.lead_a)
        self.lead_b = float(self.lead_b)
        self.feature_a_width = float(self.feature_a_width)
        self.feature_a_length = float(self.feature_a_length)
        self.feature_b_width = float(self.feature_b_width)
        self.feature_b_length = float(self.feature_b_length)


@dataclass(frozen=True)
class ThickLineParameters:
    """Fully derived thick line parameters.

    Terminator sizes are the effective ones: both are 0 for an end whose
    feature is ``FeatureType.NONE``, whatever the raw input said.

    Attributes:
        inputs: The raw inputs these parameters were derived from
        length: Distance between A and B
        direction: Unit vector from A to B
        normal: ``direction`` rotated 90 degrees counter-clockwise
        a_ext: A pushed outward by ``lead_a`` (tip at A)
        b_ext: B pushed outward by ``lead_b`` (tip at B)
        a_base: Base of the A terminator, ``a_ext`` moved inward by its length
        b_base: Base of the B terminator, ``b_ext`` moved inward by its length
        feature_a_width: Effective terminator width at A
        feature_a_length: Effective terminator length at A
        feature_b_width: Effective terminator width at B
        feature_b_length: Effective terminator length at B
    """

    inputs: ThickLineInputs
    length: float
    direction: Vector2
    normal: Vector2
    a_ext: Vector2
    b_ext: Vector2
    a_base: Vector2
    b_base: Vector2
    feature_a_width: float
    feature_a_length: float
    feature_b_width: float
    feature_b_length: float

    @property
    def a(self) -> Vector2:
        return self.inputs.a

    @property
    def b(self) -> Vector2:
        return self.inputs.b

    @property
    def width(self) -> float:
        return self.inputs.width

    @property
    def half_width(self) -> float:
        return self.inputs.width * 0.5

    @property
    def lead_a(self) -> float:
        return self.inputs.lead_a

    @property
    def lead_b(self) -> float:
        return self.inputs.lead_b

    @property
    def feature_a(self) -> FeatureType:
        return self.inputs.feature_a

    @property
    def feature_b(self) -> FeatureType:
        return self.inputs.feature_b

    @property
    def body_length(self) -> float:
        """Signed length of the body between the two bases along ``direction``."""
        return (self.b_base - self.a_base).dot(self.direction)


def _effective_size(feature: FeatureType, value: float) -> float:
    return value if feature.is_active else 0.0


def derive_parameters(inputs: ThickLineInputs) -> ThickLineParameters:
    """Derive direction, tips and terminator bases from raw inputs.

    Args:
        inputs: Raw thick line inputs

    Returns:
        Derived parameters (not yet validated)

    Raises:
        DegenerateGeometryError: If A and B are closer than ``EPS_COINCIDENT``
    """
    diff = as_vector(inputs.b - inputs.a)
    length = diff.length()
    if length <= EPS_COINCIDENT:
        raise DegenerateGeometryError(
            MSG_COINCIDENT, context={"a": inputs.a.to_json(), "b": inputs.b.to_json()}
        )

    direction = Vector2(diff.x / length, diff.y / length)
    normal = direction.perp_ccw()

    feature_a_length = _effective_size(inputs.feature_a, inputs.feature_a_length)
    feature_b_length = _effective_size(inputs.feature_b, inputs.feature_b_length)

    # Leads push the tips outward, away from the segment interior
    a_ext = as_vector(inputs.a - direction * inputs.lead_a)
    b_ext = as_vector(inputs.b + direction * inputs.lead_b)

    # Bases are pulled back inward from the tips by the terminator lengths
    a_base = as_vector(a_ext + direction * feature_a_length)
    b_base = as_vector(b_ext - direction * feature_b_length)

    return ThickLineParameters(
        inputs=inputs,
        length=length,
        direction=direction,
        normal=normal,
        a_ext=a_ext,
        b_ext=b_ext,
        a_base=a_base,
        b_base=b_base,
        feature_a_width=_effective_size(inputs.feature_a, inputs.feature_a_width),
        feature_a_length=feature_a_length,
        feature_b_width=_effective_size(inputs.feature_b, inputs.feature_b_width),
        feature_b_length=feature_b_length,
    )
