from __future__ import annotations

from typing import Iterable, List, Tuple

ROOT_LABEL = "(root)"

Path = Tuple[int, ...]


def normalize_path(path: Iterable[int]) -> Path:
    """Return ``path`` as a tuple of ints.

    Only the shape is checked here; whether the indices exist in a given tree
    is decided by the editor while it descends.
    """
    if path is None:
        return ()
    out: List[int] = []
    for idx in path:
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise TypeError(f"Path indices must be integers, got {idx!r}")
        out.append(idx)
    return tuple(out)


def format_path(path: Iterable[int]) -> str:
    """Render a path as dot-separated indices, e.g. ``(0, 2) -> '0.2'``."""
    path = normalize_path(path)
    if not path:
        return ROOT_LABEL
    return ".".join(str(i) for i in path)


def child_path(path: Iterable[int], index: int) -> Path:
    return normalize_path(path) + (index,)
