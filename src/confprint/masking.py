"""Value rendering and masking for configuration reports."""

from enum import Enum
from typing import Any, Optional

from pydantic import SecretBytes, SecretStr

from confprint.constants import MASK_CHARACTER
from confprint.models import PrinterConfig


def render_value(value: Any) -> str:
    """Convert a field value to its human-readable text.

    Booleans render as ``true``/``false`` and None as an empty string.
    Enums render through their value. Pydantic secrets are unwrapped so that
    masking is decided on the real secret length.

    Parameters:
        value: The raw field value.

    Returns:
        str: The rendered value.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return render_value(value.value)
    if isinstance(value, SecretStr):
        return value.get_secret_value()
    if isinstance(value, SecretBytes):
        return value.get_secret_value().decode("utf-8", errors="replace")
    return str(value)


def mask_value(value: str, config: Optional[PrinterConfig] = None) -> str:
    """Mask a sensitive value, revealing a short suffix of long values.

    Values at least ``min_secret_length_for_suffix`` characters long keep
    their last ``visible_suffix_length`` characters, clamped to the value's
    length. Shorter values are replaced by the mask alone.

    Parameters:
        value: The rendered value to mask.
        config: Masking options, defaults when None.

    Returns:
        str: The masked value.
    """
    if config is None:
        config = PrinterConfig()
    mask = MASK_CHARACTER * config.mask_length
    if len(value) >= config.min_secret_length_for_suffix:
        start = max(len(value) - config.visible_suffix_length, 0)
        return mask + value[start:]
    return mask
