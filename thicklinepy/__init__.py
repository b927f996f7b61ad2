"""
thicklinepy - sketch geometry for thick lines with arrow and T terminators.

This package turns two picked points and a handful of scalar settings into
validated polygons ready to be drawn in a 2D sketch.
"""

__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

# Host-facing driver
from .app import ThickLineApp, default_settings_path

# Core geometry types
from .cad_types import Vector2
from .exceptions import (
    ConstraintViolationError,
    DegenerateGeometryError,
    InputMissingError,
    ThickLineError,
)
from .feature import FeatureType

# Pipeline stages
from .parameters import ThickLineInputs, ThickLineParameters, derive_parameters
from .primitives import Line, Polygon
from .settings import (
    ThickLineSettings,
    decode_settings,
    encode_settings,
    load_settings,
    save_settings,
)
from .shape_generator import generate_shapes
from .thick_line import ThickLineResult, build_thick_line
from .validation import ValidationResult, validate_parameters

# Define what gets imported with "from thicklinepy import *"
__all__ = [
    # Host driver
    "ThickLineApp",
    "default_settings_path",
    # Geometry types
    "Vector2",
    "Line",
    "Polygon",
    "FeatureType",
    # Pipeline
    "ThickLineInputs",
    "ThickLineParameters",
    "derive_parameters",
    "ValidationResult",
    "validate_parameters",
    "generate_shapes",
    "ThickLineResult",
    "build_thick_line",
    # Settings
    "ThickLineSettings",
    "encode_settings",
    "decode_settings",
    "load_settings",
    "save_settings",
    # Errors
    "ThickLineError",
    "InputMissingError",
    "DegenerateGeometryError",
    "ConstraintViolationError",
]
