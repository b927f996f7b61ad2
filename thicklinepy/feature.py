from enum import Enum
from typing import Union

from .constants import ALL_FEATURE_TYPES, ARROW_IDX, NONE_IDX, T_IDX


class FeatureType(Enum):
    """Terminator shape drawn at one end of a thick line."""

    NONE = ALL_FEATURE_TYPES[NONE_IDX]
    ARROW = ALL_FEATURE_TYPES[ARROW_IDX]
    T = ALL_FEATURE_TYPES[T_IDX]

    @property
    def is_active(self) -> bool:
        return self is not FeatureType.NONE

    @classmethod
    def from_string(cls, value: Union[str, "FeatureType", None]) -> "FeatureType":
        """Normalize a dropdown/settings name into a FeatureType.

        Matching ignores case and surrounding whitespace; ``None`` or an empty
        string map to ``FeatureType.NONE``.
        """
        if isinstance(value, FeatureType):
            return value
        if value is None:
            return cls.NONE
        normalized = value.strip().lower()
        if not normalized:
            return cls.NONE
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown feature type: {value}")
