"""
Polygon generation for validated thick line parameters.

The body is always emitted first, followed by the terminator at A and the
terminator at B when those ends are active.
"""

from typing import List, Optional

from .cad_types import Vector2, as_vector
from .feature import FeatureType
from .parameters import ThickLineParameters
from .primitives import Polygon


def three_point_rectangle(
    p0: Vector2, p1: Vector2, p3: Vector2, role: str = "body", feature: Optional[FeatureType] = None
) -> Polygon:
    """Rectangle from one corner and its two neighbours.

    The fourth corner completes the parallelogram, so the corners come out
    as p0, p1, p1 + (p3 - p0), p3 and the outline never crosses itself.
    """
    p2 = as_vector(p1 + (p3 - p0))
    return Polygon([p0, p1, p2, p3], role=role, feature=feature)


def triangle(a: Vector2, b: Vector2, c: Vector2, role: str, feature: FeatureType) -> Polygon:
    return Polygon([a, b, c], role=role, feature=feature)


def body_polygon(params: ThickLineParameters) -> Polygon:
    half = params.normal * params.half_width
    a_plus = as_vector(params.a_base + half)
    a_minus = as_vector(params.a_base - half)
    b_plus = as_vector(params.b_base + half)
    return three_point_rectangle(a_plus, b_plus, a_minus, role="body")


def _terminator(
    feature: FeatureType,
    base: Vector2,
    tip: Vector2,
    toward_tip: Vector2,
    normal: Vector2,
    width: float,
    length: float,
    role: str,
) -> Optional[Polygon]:
    if feature is FeatureType.NONE:
        return None

    side = normal * (width * 0.5)
    left = as_vector(base + side)
    right = as_vector(base - side)

    if feature is FeatureType.ARROW:
        return triangle(left, tip, right, role=role, feature=feature)

    # T: a full-width bar running from the base out to the tip
    advance = toward_tip * length
    left_out = as_vector(left + advance)
    return three_point_rectangle(left, left_out, right, role=role, feature=feature)


def generate_shapes(params: ThickLineParameters) -> List[Polygon]:
    """Emit the body and terminator polygons of a validated thick line.

    Must only be called with parameters that passed ``validate_parameters``.

    Args:
        params: Validated thick line parameters

    Returns:
        Ordered polygons: body, then terminator A and terminator B if present
    """
    polygons = [body_polygon(params)]

    feature_a = _terminator(
        params.feature_a,
        base=params.a_base,
        tip=params.a_ext,
        toward_tip=as_vector(-params.direction),
        normal=params.normal,
        width=params.feature_a_width,
        length=params.feature_a_length,
        role="feature_a",
    )
    if feature_a is not None:
        polygons.append(feature_a)

    feature_b = _terminator(
        params.feature_b,
        base=params.b_base,
        tip=params.b_ext,
        toward_tip=params.direction,
        normal=params.normal,
        width=params.feature_b_width,
        length=params.feature_b_length,
        role="feature_b",
    )
    if feature_b is not None:
        polygons.append(feature_b)

    return polygons
