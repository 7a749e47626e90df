from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Tuple

import gradio as gr

from . import editor
from .errors import ExportError, InvalidPathError
from .fields import Field, FieldTree, tree_to_dicts
from .generator import generate
from .io_utils import DEFAULT_EXPORT_NAME, dump_document, export_document
from .paths import format_path

logger = logging.getLogger(__name__)


def render_preview(tree: Optional[Sequence[Field]]) -> str:
    """Text shown in the live preview panel; regenerated on every change."""
    return dump_document(generate(tree or ()))


def _apply(edit, tree, path, *args) -> Tuple[FieldTree, str]:
    tree = tuple(tree or ())
    try:
        new_tree = edit(tree, path, *args)
    except InvalidPathError as e:
        logger.warning("Rejected edit at %s: %s", format_path(path), e)
        raise gr.Error(f"This field no longer exists ({format_path(path)}). Please retry.") from e
    except ValueError as e:
        raise gr.Error(str(e)) from e

    # An unchanged tree keeps the same state object, so blurring a name box
    # without typing does not re-render the rows and swallow the next click.
    if new_tree == tree:
        return tree, render_preview(tree)
    logger.debug("Tree after %s at %s: %s", edit.__name__, format_path(path), tree_to_dicts(new_tree))
    return new_tree, render_preview(new_tree)


def handle_add_field(path, tree):
    return _apply(editor.add, tree, path)


def handle_rename(path, tree, name):
    return _apply(editor.rename, tree, path, name or "")


def handle_retype(path, tree, type_value):
    return _apply(editor.retype, tree, path, type_value or "")


def handle_delete(path, tree):
    return _apply(editor.delete, tree, path)


def submit_handler(tree, file_name: Optional[str] = DEFAULT_EXPORT_NAME, directory: Optional[str] = None):
    document: Any = generate(tree or ())
    logger.info("Submitted JSON: %s", dump_document(document))

    try:
        path = export_document(document, file_name, directory)
    except ExportError as e:
        return None, f"Error during export: {e}"
    return path, f"Export successful! Saved to {path}"
