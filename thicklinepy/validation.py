from dataclasses import dataclass

from .constants import (
    EPS_COINCIDENT,
    EPS_SKETCH_LEN,
    MSG_CONSUMED,
    MSG_COINCIDENT,
    MSG_FEATURE_LENGTH,
    MSG_FEATURE_WIDTH,
    MSG_LEAD,
    MSG_WIDTH,
)
from .exceptions import ConstraintViolationError
from .feature import FeatureType
from .parameters import ThickLineParameters


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a parameter record: a flag and one reason."""

    valid: bool
    message: str = ""

    def __bool__(self) -> bool:
        return self.valid

    def raise_for_status(self) -> None:
        if not self.valid:
            raise ConstraintViolationError(self.message)


VALID = ValidationResult(True)


def _check_feature(end: str, feature: FeatureType, width: float, length: float, line_width: float):
    if not feature.is_active:
        return None
    if not width >= line_width:
        return MSG_FEATURE_WIDTH.format(end=end)
    if not length > 0:
        return MSG_FEATURE_LENGTH.format(end=end)
    return None


def validate_parameters(params: ThickLineParameters) -> ValidationResult:
    """Check derived parameters for geometric feasibility.

    Checks run in a fixed order and the first failure is reported:
    line width, point coincidence, feature A, feature B, leads and finally
    whether the leads and terminators leave a body of positive length.
    Every comparison is phrased so that NaN fails it.

    Args:
        params: Derived thick line parameters

    Returns:
        ValidationResult with ``valid`` set and, on failure, the reason
    """
    if not params.width > 0:
        return ValidationResult(False, MSG_WIDTH)

    if not params.length > EPS_COINCIDENT:
        return ValidationResult(False, MSG_COINCIDENT)

    for end, feature, width, length in (
        ("A", params.feature_a, params.feature_a_width, params.feature_a_length),
        ("B", params.feature_b, params.feature_b_width, params.feature_b_length),
    ):
        message = _check_feature(end, feature, width, length, params.width)
        if message is not None:
            return ValidationResult(False, message)

    for end, lead in (("A", params.lead_a), ("B", params.lead_b)):
        if not lead >= 0:
            return ValidationResult(False, MSG_LEAD.format(end=end))

    # Depends on what both ends consume, so it has to come last
    if not params.body_length > EPS_SKETCH_LEN:
        return ValidationResult(False, MSG_CONSUMED)

    return VALID
