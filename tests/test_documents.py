"""Tests for realm_clone.documents: loading and writing realm exports."""

import json
from pathlib import Path

import pytest

from realm_clone.core.errors import (
    DocumentError,
    DocumentNotFoundError,
    DocumentParseError,
    DocumentWriteError,
    ErrorCategory,
)
from realm_clone.documents import (
    DEFAULT_OUTPUT_TEMPLATE,
    detect_realm_name,
    load_document,
    output_path_for,
    write_document,
)


class TestLoadDocument:
    def test_loads_object(self, realm_export_file, realm_export):
        assert load_document(realm_export_file) == realm_export

    def test_accepts_string_path(self, realm_export_file):
        assert load_document(str(realm_export_file))["realm"] == "ajax"

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "nope.json"
        with pytest.raises(DocumentNotFoundError) as exc_info:
            load_document(missing)

        assert exc_info.value.message == f"File {missing} not found"
        assert exc_info.value.context.path == str(missing)

    def test_directory_is_not_a_document(self, tmp_path):
        with pytest.raises(DocumentNotFoundError):
            load_document(tmp_path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"realm": "ajax",', encoding="utf-8")

        with pytest.raises(DocumentParseError) as exc_info:
            load_document(path)

        error = exc_info.value
        assert "is not valid JSON" in error.message
        assert isinstance(error.cause, json.JSONDecodeError)
        assert error.context.path == str(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"realm": "caf\xe9"}')

        with pytest.raises(DocumentParseError, match="not UTF-8"):
            load_document(path)

    def test_unreadable_file_is_source_error(self, realm_export_file, monkeypatch):
        def deny(*args, **kwargs):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(Path, "open", deny)

        with pytest.raises(DocumentError) as exc_info:
            load_document(realm_export_file)

        error = exc_info.value
        assert type(error) is DocumentError
        assert error.category == ErrorCategory.SOURCE
        assert isinstance(error.cause, PermissionError)
        assert error.context.path == str(realm_export_file)

    @pytest.mark.parametrize("content", ["[]", '"ajax"', "42", "null"])
    def test_top_level_must_be_object(self, tmp_path, content):
        path = tmp_path / "realm.json"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(DocumentParseError, match="must contain a JSON object"):
            load_document(path)

    def test_errors_share_document_base(self, tmp_path):
        with pytest.raises(DocumentError):
            load_document(tmp_path / "nope.json")


class TestDetectRealmName:
    def test_detects_realm(self, realm_export):
        assert detect_realm_name(realm_export) == "ajax"

    @pytest.mark.parametrize("document", [{}, {"realm": ""}, {"realm": "   "}, {"realm": 7}])
    def test_missing_or_unusable(self, document):
        assert detect_realm_name(document) is None


class TestOutputPath:
    def test_default_template(self):
        assert output_path_for("ajax-dev") == Path("ajax-dev-realm-export.json")
        assert DEFAULT_OUTPUT_TEMPLATE == "{realm}-realm-export.json"

    def test_output_dir_and_template(self, tmp_path):
        path = output_path_for("ajax-qa", tmp_path, "clone-{realm}.json")
        assert path == tmp_path / "clone-ajax-qa.json"


class TestWriteDocument:
    def test_writes_json_with_indent(self, tmp_path):
        path = write_document({"realm": "ajax", "roles": {"realm": []}}, tmp_path / "out.json")

        text = path.read_text(encoding="utf-8")
        assert text == '{\n  "realm": "ajax",\n  "roles": {\n    "realm": []\n  }\n}'

    def test_custom_indent(self, tmp_path):
        path = write_document({"a": 1}, tmp_path / "out.json", indent=4)
        assert path.read_text(encoding="utf-8") == '{\n    "a": 1\n}'

    def test_non_ascii_preserved(self, tmp_path):
        path = write_document({"displayName": "Café Ünïcode"}, tmp_path / "out.json")
        assert "Café Ünïcode" in path.read_text(encoding="utf-8")

    def test_creates_parent_directories(self, tmp_path):
        target = tmp_path / "clones" / "dev" / "out.json"
        write_document({"realm": "ajax-dev"}, target)
        assert json.loads(target.read_text(encoding="utf-8")) == {"realm": "ajax-dev"}

    def test_round_trips_realm_export(self, tmp_path, realm_export):
        path = write_document(realm_export, tmp_path / "out.json")
        assert load_document(path) == realm_export

    def test_write_failure(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(DocumentWriteError) as exc_info:
            write_document({"realm": "x"}, blocker / "out.json")

        assert exc_info.value.context.path == str(blocker / "out.json")
        assert isinstance(exc_info.value.cause, OSError)
