"""Path-addressed edits of a field tree.

Every operation returns a new tree. Only the chain of ancestors leading to the
edited list is rebuilt; all other subtrees are shared with the input, which is
never modified.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Sequence, Tuple

from .errors import InvalidPathError
from .fields import Field, FieldTree, FieldType, coerce_field_type, default_field
from .paths import Path, normalize_path

logger = logging.getLogger(__name__)

ListOp = Callable[[Tuple[Field, ...]], Tuple[Field, ...]]

UPDATABLE_KEYS = ("name", "type")


def _check_index(items: Sequence[Field], path: Path, depth: int) -> int:
    i = path[depth]
    if i < 0 or i >= len(items):
        raise InvalidPathError(path, depth, f"index {i} out of range for list of length {len(items)}")
    return i


def _children_of(field: Field, path: Path, depth: int) -> Tuple[Field, ...]:
    if not field.type.is_container:
        kind = field.type.value or "Unset"
        raise InvalidPathError(path, depth, f"field {field.name!r} of type {kind} has no children")
    return field.children or ()


def _edit_list(items: Tuple[Field, ...], path: Path, depth: int, list_path_len: int, op: ListOp) -> Tuple[Field, ...]:
    """Apply ``op`` to the list addressed by ``path[:list_path_len]``.

    At every shallower depth the ancestor is copied with a replaced
    ``children`` tuple.
    """
    if depth == list_path_len:
        return op(items)

    i = _check_index(items, path, depth)
    parent = items[i]
    children = _children_of(parent, path, depth)
    new_children = _edit_list(children, path, depth + 1, list_path_len, op)
    return items[:i] + (parent.model_copy(update={"children": new_children}),) + items[i + 1:]


def _edit_field(tree: Iterable[Field], path: Iterable[int], change: Callable[[Field], Field]) -> FieldTree:
    path = normalize_path(path)
    if not path:
        raise InvalidPathError(path, 0, "the root list is not a field")
    last = len(path) - 1

    def replace(items: Tuple[Field, ...]) -> Tuple[Field, ...]:
        i = _check_index(items, path, last)
        return items[:i] + (change(items[i]),) + items[i + 1:]

    return _edit_list(tuple(tree), path, 0, last, replace)


def rename(tree: Iterable[Field], path: Iterable[int], name: str) -> FieldTree:
    """Set the name of the field at ``path``. Any string is accepted."""
    if not isinstance(name, str):
        raise ValueError(f"Field names must be strings, got {type(name).__name__}")
    path = normalize_path(path)
    logger.debug("rename %s -> %r", list(path), name)
    return _edit_field(tree, path, lambda f: f.model_copy(update={"name": name}))


def _with_type(field: Field, new_type: FieldType) -> Field:
    if new_type.is_container:
        children = field.children if field.children is not None else (default_field(),)
    else:
        children = None
    return field.model_copy(update={"type": new_type, "children": children})


def retype(tree: Iterable[Field], path: Iterable[int], new_type: Any) -> FieldTree:
    """Change the type of the field at ``path``.

    Switching into Nested/Array keeps existing children, or seeds one default
    field. Switching to any other kind discards the subtree.
    """
    new_type = coerce_field_type(new_type)
    path = normalize_path(path)
    logger.debug("retype %s -> %s", list(path), new_type.value or "Unset")
    return _edit_field(tree, path, lambda f: _with_type(f, new_type))


def update(tree: Iterable[Field], path: Iterable[int], key: str, value: Any) -> FieldTree:
    """Dispatch a ``(key, value)`` edit coming from the UI to rename/retype."""
    if key == "name":
        return rename(tree, path, value)
    if key == "type":
        return retype(tree, path, value)
    raise ValueError(f"Unsupported field attribute {key!r}; expected one of {UPDATABLE_KEYS}")


def add(tree: Iterable[Field], path: Iterable[int] = ()) -> FieldTree:
    """Append a default field to the list at ``path`` (the root when empty)."""
    path = normalize_path(path)
    logger.debug("add under %s", list(path))
    return _edit_list(tuple(tree), path, 0, len(path), lambda items: items + (default_field(),))


def delete(tree: Iterable[Field], path: Iterable[int]) -> FieldTree:
    """Remove the field at ``path`` with its whole subtree.

    Later siblings shift left. Removing the last child leaves an empty tuple.
    """
    path = normalize_path(path)
    if not path:
        raise InvalidPathError(path, 0, "cannot delete the root list")
    last = len(path) - 1
    logger.debug("delete %s", list(path))

    def remove(items: Tuple[Field, ...]) -> Tuple[Field, ...]:
        i = _check_index(items, path, last)
        return items[:i] + items[i + 1:]

    return _edit_list(tuple(tree), path, 0, last, remove)
