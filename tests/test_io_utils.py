"""Tests for document export"""

import json
import os

import pytest

from json_field_builder.errors import ExportError
from json_field_builder.io_utils import dump_document, export_document


class TestDumpDocument:
    """Tests for dump_document"""

    def test_two_space_indent(self):
        assert dump_document({"a": {"b": [1]}}) == '{\n  "a": {\n    "b": [\n      1\n    ]\n  }\n}'

    def test_non_ascii_kept(self):
        assert dump_document({"名前": "é"}) == '{\n  "名前": "é"\n}'


class TestExportDocument:
    """Tests for export_document"""

    def test_default_name(self, tmp_path):
        path = export_document({"title": "String"}, directory=str(tmp_path))
        assert os.path.basename(path) == "schema.json"
        with open(path, encoding="utf-8") as f:
            assert json.load(f) == {"title": "String"}

    def test_extension_added(self, tmp_path):
        path = export_document({}, "out", str(tmp_path))
        assert path == os.path.join(str(tmp_path), "out.json")

    def test_blank_name_falls_back(self, tmp_path):
        path = export_document({}, "   ", str(tmp_path))
        assert os.path.basename(path) == "schema.json"

    def test_directory_components_stripped(self, tmp_path):
        path = export_document({}, "../escape.json", str(tmp_path))
        assert os.path.dirname(path) == str(tmp_path)

    def test_creates_directory(self, tmp_path):
        target = tmp_path / "nested" / "dir"
        path = export_document({}, directory=str(target))
        assert os.path.exists(path)

    def test_write_failure(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(ExportError):
            export_document({}, directory=str(blocker))
