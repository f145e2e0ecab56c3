"""Printing configuration records with masked secrets.

The report lists every public field of a record, sorted by name, with the
separator column aligned:

    === Configuration ===
    APIKey     : ********123
    Environment: development
    Port       : 8080

Fields not annotated as safe are masked.
"""

import logging
from typing import Any, Optional, Protocol

from confprint.constants import (
    DEFAULT_LOGGER_NAME,
    KEY_VALUE_SEPARATOR,
    REPORT_HEADER,
)
from confprint.exceptions import InvalidInputKindError
from confprint.fields import collect_entries
from confprint.log import get_logger
from confprint.models import FieldEntry, PrinterConfig, resolve_config

logger = logging.getLogger(__name__)


class TextSink(Protocol):  # pylint: disable=too-few-public-methods
    """Anything accepting text through a ``write`` method."""

    def write(self, text: str, /) -> Any:
        """Write text to the sink."""


def format_lines(entries: list[FieldEntry]) -> list[str]:
    """Lay out report lines for already collected entries.

    Parameters:
        entries: Entries in the order they should be printed.

    Returns:
        list[str]: Header followed by one aligned line per entry, without
        line terminators.
    """
    width = max((len(entry.key) for entry in entries), default=0)
    return [REPORT_HEADER] + [
        f"{entry.key.ljust(width)}{KEY_VALUE_SEPARATOR}{entry.value}"
        for entry in entries
    ]


def _report_lines(record: Any, config: PrinterConfig) -> list[str]:
    try:
        entries = collect_entries(record, config)
    except InvalidInputKindError as e:
        logger.debug("Refusing to print configuration: %s", e)
        raise
    return format_lines(entries)


def format_configuration(
    record: Any, config: Optional[PrinterConfig] = None, **options: int
) -> str:
    """Render the configuration report as text.

    Parameters:
        record: A dataclass instance or pydantic model instance.
        config: Masking options, defaults when None.
        options: Overrides for single ``PrinterConfig`` fields.

    Returns:
        str: The report, each line terminated by a newline.

    Raises:
        InvalidInputKindError: If ``record`` is not a structured record.
        pydantic.ValidationError: If the options are invalid.
    """
    lines = _report_lines(record, resolve_config(config, **options))
    return "".join(f"{line}\n" for line in lines)


def print_configuration(
    sink: TextSink,
    record: Any,
    config: Optional[PrinterConfig] = None,
    **options: int,
) -> None:
    """Write the configuration report to a text sink.

    The report is rendered in full before the single write, so a rejected
    record leaves the sink untouched. The sink is neither flushed nor closed.

    Parameters:
        sink: Destination with a ``write`` method, e.g. ``sys.stdout``.
        record: A dataclass instance or pydantic model instance.
        config: Masking options, defaults when None.
        options: Overrides for single ``PrinterConfig`` fields.

    Raises:
        InvalidInputKindError: If ``record`` is not a structured record.
        pydantic.ValidationError: If the options are invalid.
    """
    sink.write(format_configuration(record, config, **options))


def log_configuration(
    record: Any,
    config: Optional[PrinterConfig] = None,
    log: Optional[logging.Logger] = None,
    level: int = logging.INFO,
    **options: int,
) -> None:
    """Emit the configuration report through a logger, one record per line.

    Parameters:
        record: A dataclass instance or pydantic model instance.
        config: Masking options, defaults when None.
        log: Target logger. When None, the Rich console logger named
            ``confprint`` is used, with its threshold lowered to ``level`` so
            the report is not filtered out.
        level: Logging level of the emitted records.
        options: Overrides for single ``PrinterConfig`` fields.

    Raises:
        InvalidInputKindError: If ``record`` is not a structured record.
        pydantic.ValidationError: If the options are invalid.
    """
    lines = _report_lines(record, resolve_config(config, **options))
    if log is None:
        log = get_logger(DEFAULT_LOGGER_NAME, level=level)
    for line in lines:
        log.log(level, "%s", line)


class ConfigPrinter:
    """Configuration printer bound to one immutable set of masking options."""

    def __init__(
        self, config: Optional[PrinterConfig] = None, **options: int
    ) -> None:
        """Resolve the masking options once.

        Parameters:
            config: Base masking options, defaults when None.
            options: Overrides for single ``PrinterConfig`` fields.

        Raises:
            pydantic.ValidationError: If the options are invalid.
        """
        self._config = resolve_config(config, **options)

    @property
    def config(self) -> PrinterConfig:
        """Masking options used by this printer."""
        return self._config

    def format(self, record: Any) -> str:
        """Render the configuration report as text."""
        return format_configuration(record, self._config)

    def print(self, sink: TextSink, record: Any) -> None:
        """Write the configuration report to a text sink."""
        print_configuration(sink, record, self._config)

    def log(
        self,
        record: Any,
        log: Optional[logging.Logger] = None,
        level: int = logging.INFO,
    ) -> None:
        """Emit the configuration report through a logger."""
        log_configuration(record, self._config, log=log, level=level)
