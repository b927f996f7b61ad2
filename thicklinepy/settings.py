"""
Persistence of the last used thick line settings.

Settings are stored as flat ``key=value`` text. Reading is tolerant: unknown
keys, lines without a separator and unparsable numbers are skipped, leaving
the defaults in place. Writing is best effort and never raises.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Union

from .cad_types import VectorLike
from .constants import (
    DEFAULT_FEATURE_LENGTH_CM,
    DEFAULT_FEATURE_TYPE,
    DEFAULT_FEATURE_WIDTH_CM,
    DEFAULT_LEAD_CM,
    DEFAULT_WIDTH_CM,
    SETTINGS_KEYS,
    SETTINGS_SEPARATOR,
    SETTINGS_TEXT_KEYS,
)
from .feature import FeatureType
from .parameters import ThickLineInputs

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

# Stored key -> ThickLineSettings attribute
KEY_TO_FIELD = dict(
    zip(
        SETTINGS_KEYS,
        [
            "width_cm",
            "feature_a_type",
            "lead_a_cm",
            "feature_a_length_cm",
            "feature_a_width_cm",
            "feature_b_type",
            "lead_b_cm",
            "feature_b_length_cm",
            "feature_b_width_cm",
        ],
    )
)


@dataclass
class ThickLineSettings:
    """Last used scalar settings of the thick line command."""

    width_cm: float = DEFAULT_WIDTH_CM
    feature_a_type: str = DEFAULT_FEATURE_TYPE
    lead_a_cm: float = DEFAULT_LEAD_CM
    feature_a_length_cm: float = DEFAULT_FEATURE_LENGTH_CM
    feature_a_width_cm: float = DEFAULT_FEATURE_WIDTH_CM
    feature_b_type: str = DEFAULT_FEATURE_TYPE
    lead_b_cm: float = DEFAULT_LEAD_CM
    feature_b_length_cm: float = DEFAULT_FEATURE_LENGTH_CM
    feature_b_width_cm: float = DEFAULT_FEATURE_WIDTH_CM

    @property
    def feature_a(self) -> FeatureType:
        return _resolve_feature(self.feature_a_type, "featAType")

    @property
    def feature_b(self) -> FeatureType:
        return _resolve_feature(self.feature_b_type, "featBType")

    @classmethod
    def from_inputs(cls, inputs: ThickLineInputs) -> "ThickLineSettings":
        """Capture the scalar part of a set of inputs.

        Terminator sizes are kept as typed, even for an inactive end, so they
        come back when the user switches the terminator on again.
        """
        return cls(
            width_cm=inputs.width,
            feature_a_type=inputs.feature_a.value,
            lead_a_cm=inputs.lead_a,
            feature_a_length_cm=inputs.feature_a_length,
            feature_a_width_cm=inputs.feature_a_width,
            feature_b_type=inputs.feature_b.value,
            lead_b_cm=inputs.lead_b,
            feature_b_length_cm=inputs.feature_b_length,
            feature_b_width_cm=inputs.feature_b_width,
        )

    def apply(self, a: VectorLike, b: VectorLike) -> ThickLineInputs:
        """Build pipeline inputs for two picked points from these settings."""
        return ThickLineInputs(
            a=a,
            b=b,
            width=self.width_cm,
            lead_a=self.lead_a_cm,
            lead_b=self.lead_b_cm,
            feature_a=self.feature_a,
            feature_a_width=self.feature_a_width_cm,
            feature_a_length=self.feature_a_length_cm,
            feature_b=self.feature_b,
            feature_b_width=self.feature_b_width_cm,
            feature_b_length=self.feature_b_length_cm,
        )


def _resolve_feature(name: str, key: str) -> FeatureType:
    try:
        return FeatureType.from_string(name)
    except ValueError:
        logger.warning(f"Unknown feature type '{name}' for {key}, using None")
        return FeatureType.NONE


def encode_settings(settings: ThickLineSettings) -> str:
    """Serialize settings to ``key=value`` lines in a fixed key order."""
    lines = []
    for key, attr in KEY_TO_FIELD.items():
        value = getattr(settings, attr)
        if key in SETTINGS_TEXT_KEYS:
            # One line per key; embedded line breaks would start new keys
            text = " ".join(str(value).splitlines()).strip()
        else:
            text = repr(float(value))
        lines.append(f"{key}{SETTINGS_SEPARATOR}{text}")
    return "\n".join(lines) + "\n"


def decode_settings(text: Optional[str]) -> ThickLineSettings:
    """Parse settings text, falling back to defaults for anything unusable."""
    settings = ThickLineSettings()
    if text is None:
        return settings

    for line in text.splitlines():
        if SETTINGS_SEPARATOR not in line:
            continue
        key, _, value = line.partition(SETTINGS_SEPARATOR)
        key, value = key.strip(), value.strip()
        attr = KEY_TO_FIELD.get(key)
        if attr is None:
            continue
        if key in SETTINGS_TEXT_KEYS:
            setattr(settings, attr, value)
            continue
        try:
            setattr(settings, attr, float(value))
        except ValueError:
            logger.debug(f"Ignoring bad value for {key}: {value!r}")
    return settings


def load_settings(path: Optional[PathLike]) -> ThickLineSettings:
    """Read settings from ``path``; defaults if it is missing or unreadable."""
    if path is None:
        return ThickLineSettings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, ValueError) as e:
        logger.info(f"No settings loaded from {path}: {e}")
        return ThickLineSettings()
    return decode_settings(text)


def save_settings(settings: ThickLineSettings, path: PathLike) -> bool:
    """Write settings to ``path``, creating its directory. Returns success."""
    try:
        directory = os.path.dirname(os.fspath(path))
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(encode_settings(settings))
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to save settings to {path}: {e}")
        return False
    logger.info(f"[ThickLine] Settings saved to: {path}")
    return True
