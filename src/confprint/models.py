"""Models used by the configuration printer."""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from confprint import constants


class PrinterConfig(BaseModel):
    """Masking options applied to one print call.

    Attributes:
        mask_length: Number of mask characters replacing a sensitive value.
        visible_suffix_length: Number of trailing characters revealed when the
            value is long enough.
        min_secret_length_for_suffix: Value length at or above which the
            suffix is revealed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mask_length: NonNegativeInt = Field(
        default=constants.DEFAULT_MASK_LENGTH,
        description="Number of '*' characters in the mask segment",
    )
    visible_suffix_length: NonNegativeInt = Field(
        default=constants.DEFAULT_VISIBLE_SUFFIX_LENGTH,
        description="Number of trailing characters revealed for long values",
    )
    min_secret_length_for_suffix: NonNegativeInt = Field(
        default=constants.DEFAULT_MIN_SECRET_LENGTH_FOR_SUFFIX,
        description="Threshold length at or above which a suffix is revealed",
    )


@dataclass(frozen=True)
class FieldEntry:
    """One rendered line of the configuration report.

    Attributes:
        key: Field name.
        value: Rendered value, already masked when the field is sensitive.
    """

    key: str
    value: str


def resolve_config(
    config: Optional[PrinterConfig] = None, **options: int
) -> PrinterConfig:
    """Return the printer configuration for one call.

    Each keyword option overrides exactly one field of ``config`` (or of the
    defaults when ``config`` is None). Options are validated, so unknown names
    and negative values raise ``pydantic.ValidationError``.

    Parameters:
        config: Base configuration, or None to start from the defaults.
        options: Field overrides, e.g. ``mask_length=4``.

    Returns:
        PrinterConfig: The resolved, immutable configuration.
    """
    if config is None:
        config = PrinterConfig()
    if not options:
        return config
    return PrinterConfig.model_validate({**config.model_dump(), **options})
