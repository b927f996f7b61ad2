ALL_FEATURE_TYPES = ["None", "Arrow", "T"]
NONE_IDX = ALL_FEATURE_TYPES.index("None")  # 0
ARROW_IDX = ALL_FEATURE_TYPES.index("Arrow")  # 1
T_IDX = ALL_FEATURE_TYPES.index("T")  # 2

# Point equality / normalization guard (sketch units)
EPS_COINCIDENT = 1e-12
# Minimum remaining body length along the baseline
EPS_SKETCH_LEN = 1e-9

DEFAULT_WIDTH_CM = 0.2
DEFAULT_LEAD_CM = 0.0
DEFAULT_FEATURE_LENGTH_CM = 0.5
DEFAULT_FEATURE_WIDTH_CM = 0.5
DEFAULT_FEATURE_TYPE = ALL_FEATURE_TYPES[NONE_IDX]

SETTINGS_SEPARATOR = "="
SETTINGS_FILE_NAME = "settings.ini"
SETTINGS_KEYS = [
    "width_cm",
    "featAType",
    "leadA_cm",
    "featAL_cm",
    "featAW_cm",
    "featBType",
    "leadB_cm",
    "featBL_cm",
    "featBW_cm",
]
SETTINGS_TEXT_KEYS = ["featAType", "featBType"]

MSG_WIDTH = "Width of line must be > 0."
MSG_COINCIDENT = "Points A and B are coincident or too close together."
MSG_FEATURE_WIDTH = "Feature {end} width must be >= line width."
MSG_FEATURE_LENGTH = "Feature {end} length must be > 0."
MSG_LEAD = "Lead {end} must be >= 0."
MSG_CONSUMED = (
    "Leads and/or feature lengths consume the segment. "
    "Reduce leads/features or move A and B further apart."
)
MSG_SELECT_POINT = "Select point or entity for {end}."
MSG_UNREADABLE_POINT = (
    "Could not read geometry for selection {end}. "
    "Please select a SketchPoint, ConstructionPoint, or Vertex."
)
