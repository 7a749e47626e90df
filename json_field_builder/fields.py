"""Field tree model.

A tree is an ordered tuple of :class:`Field` at the root. Fields are frozen, so
every edit produces a new tree that shares untouched subtrees with the old one.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator


class FieldType(str, Enum):
    """Kinds a field can be tagged with."""

    UNSET = ""
    STRING = "String"
    NUMBER = "Number"
    NESTED = "Nested"
    BOOLEAN = "Boolean"
    ARRAY = "Array"
    OBJECT = "Object"
    DATE = "Date"
    EMAIL = "Email"
    URL = "URL"
    PHONE = "Phone"
    ENUM = "Enum"
    FLOAT = "Float"

    @property
    def is_container(self) -> bool:
        return self in CONTAINER_TYPES


CONTAINER_TYPES = frozenset({FieldType.NESTED, FieldType.ARRAY})

# Order in which kinds are offered to the user; Unset is the "Select Type" slot.
FIELD_TYPE_CHOICES: List[Tuple[str, str]] = [("Select Type", FieldType.UNSET.value)] + [
    (t.value, t.value) for t in FieldType if t is not FieldType.UNSET
]


class Field(BaseModel):
    """One node of the schema tree.

    ``children`` is ``None`` (absent) for every non-container kind. A container
    may be built without children; it then behaves as an empty list.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: FieldType = FieldType.UNSET
    children: Optional[Tuple[Field, ...]] = None

    @model_validator(mode="after")
    def check_children(self) -> "Field":
        if self.children is not None and not self.type.is_container:
            raise ValueError(f"fields of type {self.type.value or 'Unset'!r} cannot have children")
        return self


FieldTree = Tuple[Field, ...]


def default_field() -> Field:
    return Field(name="", type=FieldType.UNSET)


def coerce_field_type(value: Any) -> FieldType:
    """Convert a UI tag into a :class:`FieldType`, rejecting unknown tags."""
    if isinstance(value, FieldType):
        return value
    try:
        return FieldType(value)
    except ValueError:
        raise ValueError(f"Unknown field type: {value!r}") from None


def to_dict(field: Field) -> Dict[str, Any]:
    """Plain-dict view of a field; ``children`` is omitted when absent."""
    return field.model_dump(mode="json", exclude_none=True)


def tree_to_dicts(tree: Iterable[Field]) -> List[Dict[str, Any]]:
    return [to_dict(f) for f in tree]


def tree_from_dicts(data: Iterable[Dict[str, Any]]) -> FieldTree:
    return tuple(Field.model_validate(item) for item in data)
