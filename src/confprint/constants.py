"""Constants used across the configuration printer."""

from typing import Final

# Masking defaults
DEFAULT_MASK_LENGTH: Final[int] = 8
DEFAULT_VISIBLE_SUFFIX_LENGTH: Final[int] = 3
DEFAULT_MIN_SECRET_LENGTH_FOR_SUFFIX: Final[int] = 20

MASK_CHARACTER: Final[str] = "*"

# Report layout
REPORT_HEADER: Final[str] = "=== Configuration ==="
KEY_VALUE_SEPARATOR: Final[str] = ": "

# Per-field annotation marking a value as safe to print verbatim. Stored in
# dataclass field metadata or in pydantic's json_schema_extra.
SAFE_ANNOTATION_KEY: Final[str] = "safe"
SAFE_ANNOTATION_TOKEN: Final[str] = "true"

# Logging
CONFPRINT_LOG_LEVEL_ENV_VAR: Final[str] = "CONFPRINT_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_LOGGER_NAME: Final[str] = "confprint"
