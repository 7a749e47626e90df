"""Tests for the Gradio event handlers"""

import json
import logging
import os

import gradio as gr
import pytest

from json_field_builder.fields import FieldType
from json_field_builder.handlers import (
    handle_add_field,
    handle_delete,
    handle_rename,
    handle_retype,
    render_preview,
    submit_handler,
)


class TestEditHandlers:
    """Tests for edit handlers"""

    def test_build_from_empty_state(self):
        tree, preview = handle_add_field((), None)
        tree, preview = handle_retype((0,), tree, "Array")
        tree, preview = handle_rename((0, 0), tree, "x")
        tree, preview = handle_retype((0, 0), tree, "Number")
        tree, preview = handle_rename((0,), tree, "items")
        assert tree[0].type is FieldType.ARRAY
        assert json.loads(preview) == {"items": [{"x": "Number"}]}

    def test_delete(self):
        tree, _ = handle_add_field((), ())
        tree, _ = handle_add_field((), tree)
        tree, preview = handle_delete((0,), tree)
        assert len(tree) == 1
        assert json.loads(preview) == {"": ""}

    def test_none_name_becomes_empty(self):
        tree, _ = handle_add_field((), ())
        tree, _ = handle_rename((0,), tree, None)
        assert tree[0].name == ""

    def test_unchanged_name_keeps_state_object(self):
        tree, _ = handle_add_field((), ())
        tree, _ = handle_rename((0,), tree, "title")
        same, preview = handle_rename((0,), tree, "title")
        assert same is tree
        assert json.loads(preview) == {"title": ""}

    def test_edit_logs_tree_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="json_field_builder.handlers"):
            tree, _ = handle_add_field((), ())
            handle_rename((0,), tree, "title")
        assert "{'name': 'title', 'type': ''}" in caplog.text

    def test_stale_path_raises_gradio_error(self):
        with pytest.raises(gr.Error):
            handle_delete((3,), ())

    def test_unknown_type_raises_gradio_error(self):
        tree, _ = handle_add_field((), ())
        with pytest.raises(gr.Error):
            handle_retype((0,), tree, " ")


class TestPreview:
    """Tests for render_preview"""

    def test_empty(self):
        assert render_preview(None) == "{}"


class TestSubmit:
    """Tests for submit_handler"""

    def test_export(self, tmp_path):
        tree, _ = handle_add_field((), ())
        tree, _ = handle_rename((0,), tree, "title")
        tree, _ = handle_retype((0,), tree, "String")
        path, status = submit_handler(tree, "schema.json", str(tmp_path))
        assert path == os.path.join(str(tmp_path), "schema.json")
        assert status.startswith("Export successful!")
        with open(path, encoding="utf-8") as f:
            assert f.read() == '{\n  "title": "String"\n}'

    def test_export_failure_reported(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        path, status = submit_handler((), "schema.json", str(blocker))
        assert path is None
        assert status.startswith("Error during export")
