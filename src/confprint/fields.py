"""Introspection of configuration records.

A configuration record is a dataclass instance or a pydantic model instance.
Each of its public fields may be annotated as safe to print verbatim:

    @dataclass
    class Settings:
        port: int = safe_field(default=8080)
        api_key: str = ""

    class Settings(BaseModel):
        port: int = Field(default=8080, json_schema_extra={"safe": True})
        api_key: SecretStr

Pydantic dataclasses take the pydantic form of the annotation.

Fields without the annotation are treated as sensitive.
"""

import dataclasses
import logging
from typing import Any

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from confprint.constants import SAFE_ANNOTATION_KEY, SAFE_ANNOTATION_TOKEN
from confprint.exceptions import InvalidInputKindError
from confprint.masking import mask_value, render_value
from confprint.models import FieldEntry, PrinterConfig

logger = logging.getLogger(__name__)


def safe_field(**kwargs: Any) -> Any:
    """Declare a dataclass field whose value is printed without masking.

    Accepts the same keyword arguments as ``dataclasses.field``; any metadata
    passed in is kept alongside the safe annotation.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[SAFE_ANNOTATION_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def is_safe(annotation: Any) -> bool:
    """Tell whether a field annotation exempts the field from masking.

    Only ``True`` or the literal string ``"true"`` count. Anything else,
    including a missing annotation, leaves the field sensitive.

    Parameters:
        annotation: Value stored under the safe annotation key, or None.

    Returns:
        bool: True if the field may be printed verbatim.
    """
    return annotation is True or annotation == SAFE_ANNOTATION_TOKEN


def _field_info_is_safe(info: FieldInfo) -> bool:
    """Read the safe annotation from pydantic field information."""
    extra = info.json_schema_extra
    if not isinstance(extra, dict):
        return False
    return is_safe(extra.get(SAFE_ANNOTATION_KEY))


def _pydantic_fields(
    record: Any, field_infos: dict[str, FieldInfo]
) -> list[tuple[str, Any, bool]]:
    """Return (name, value, safe) triples from pydantic field information."""
    return [
        (name, getattr(record, name), _field_info_is_safe(info))
        for name, info in field_infos.items()
        if not name.startswith("_")
    ]


def _dataclass_fields(record: Any) -> list[tuple[str, Any, bool]]:
    """Return (name, value, safe) triples for a dataclass instance."""
    field_infos = getattr(type(record), "__pydantic_fields__", None)
    if isinstance(field_infos, dict):
        return _pydantic_fields(record, field_infos)
    return [
        (
            field.name,
            getattr(record, field.name),
            is_safe(field.metadata.get(SAFE_ANNOTATION_KEY)),
        )
        for field in dataclasses.fields(record)
        if not field.name.startswith("_")
    ]


def record_fields(record: Any) -> list[tuple[str, Any, bool]]:
    """Enumerate the public fields of a configuration record.

    Fields come back in declaration order. Names starting with an underscore
    are skipped. A field that cannot be read, such as a dataclass field
    declared with ``init=False`` and never assigned, rejects the record.

    Parameters:
        record: A dataclass instance or pydantic model instance.

    Returns:
        list[tuple[str, Any, bool]]: (name, raw value, safe) per field.

    Raises:
        InvalidInputKindError: If ``record`` is not a structured record.
    """
    is_model = isinstance(record, BaseModel)
    if not is_model and (
        not dataclasses.is_dataclass(record) or isinstance(record, type)
    ):
        raise InvalidInputKindError(record)
    try:
        if is_model:
            return _pydantic_fields(record, type(record).model_fields)
        return _dataclass_fields(record)
    except AttributeError as e:
        raise InvalidInputKindError(record, reason=str(e)) from e


def collect_entries(record: Any, config: PrinterConfig) -> list[FieldEntry]:
    """Render, mask and sort the fields of a configuration record.

    Parameters:
        record: A dataclass instance or pydantic model instance.
        config: Masking options.

    Returns:
        list[FieldEntry]: Entries sorted by key in code point order.

    Raises:
        InvalidInputKindError: If ``record`` is not a structured record.
    """
    entries = []
    for name, value, safe in record_fields(record):
        rendered = render_value(value)
        if not safe:
            rendered = mask_value(rendered, config)
        entries.append(FieldEntry(key=name, value=rendered))
    entries.sort(key=lambda entry: entry.key)
    logger.debug(
        "Collected %d configuration fields from %s",
        len(entries),
        type(record).__name__,
    )
    return entries
