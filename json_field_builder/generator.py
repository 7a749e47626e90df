"""Build a sample JSON document from a field tree.

The result is an *instance* of the described shape, not a schema: every field
contributes one sample value, and an Array field holds a single representative
element built from its children.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, Optional

from .fields import Field, FieldType

Clock = Callable[[], datetime]

EMAIL_SAMPLE = "<email@example.com>"
URL_SAMPLE = "https://example.com"
PHONE_SAMPLE = "+1234567890"
ENUM_SAMPLE = ("Option1", "Option2")

# Factories, so mutable samples are never shared between documents.
SAMPLE_VALUES: Dict[FieldType, Callable[[], Any]] = {
    FieldType.STRING: lambda: "String",
    FieldType.NUMBER: lambda: "Number",
    FieldType.FLOAT: lambda: 0.0,
    FieldType.BOOLEAN: lambda: True,
    FieldType.OBJECT: dict,
    FieldType.EMAIL: lambda: EMAIL_SAMPLE,
    FieldType.URL: lambda: URL_SAMPLE,
    FieldType.PHONE: lambda: PHONE_SAMPLE,
    FieldType.ENUM: lambda: list(ENUM_SAMPLE),
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def sample_value(field: Field, now: Clock) -> Any:
    if field.type is FieldType.ARRAY:
        if field.children:
            return [generate(field.children, now=now)]
        return []
    if field.type is FieldType.NESTED:
        return generate(field.children or (), now=now)
    if field.type is FieldType.DATE:
        return format_timestamp(now())

    factory = SAMPLE_VALUES.get(field.type)
    if factory is None:
        return ""
    return factory()


def generate(fields: Iterable[Field], now: Optional[Clock] = None) -> Dict[str, Any]:
    """Map each field name to its sample value.

    Siblings sharing a name overwrite each other in order, so the last one wins.
    ``now`` supplies the timestamp for Date fields and defaults to the current
    UTC time, read at call time.
    """
    if now is None:
        now = utc_now
    obj: Dict[str, Any] = {}
    for field in fields:
        obj[field.name or ""] = sample_value(field, now)
    return obj
