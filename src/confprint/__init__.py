"""Print configuration records with secrets masked."""

from confprint.exceptions import InvalidInputKindError
from confprint.fields import is_safe, record_fields, safe_field
from confprint.masking import mask_value, render_value
from confprint.models import FieldEntry, PrinterConfig, resolve_config
from confprint.printer import (
    ConfigPrinter,
    format_configuration,
    log_configuration,
    print_configuration,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigPrinter",
    "FieldEntry",
    "InvalidInputKindError",
    "PrinterConfig",
    "format_configuration",
    "is_safe",
    "log_configuration",
    "mask_value",
    "print_configuration",
    "record_fields",
    "render_value",
    "resolve_config",
    "safe_field",
]
