# =============================================================================
# tests/test_json_store.py - Backing File Adapter Tests
# =============================================================================
# Tests for JsonProductStore reads, writes and error codes.
# =============================================================================

import json

import pytest

from lib.json_store import JsonProductStore, JsonStoreError


class TestReadAll:
    """Test reading the backing file."""

    def test_reads_records_in_order(self, store, sample_products):
        assert store.read_all() == sample_products

    def test_missing_file(self, tmp_path):
        store = JsonProductStore(tmp_path / "missing.json")

        with pytest.raises(JsonStoreError) as exc_info:
            store.read_all()

        assert exc_info.value.code == "FILE_NOT_FOUND"
        assert exc_info.value.details["path"].endswith("missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(JsonStoreError) as exc_info:
            JsonProductStore(path).read_all()

        assert exc_info.value.code == "PARSE_FAILED"

    def test_non_array_document(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text('{"products": []}', encoding="utf-8")

        with pytest.raises(JsonStoreError) as exc_info:
            JsonProductStore(path).read_all()

        assert exc_info.value.code == "INVALID_DOCUMENT"
        assert exc_info.value.details["found"] == "dict"

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_bytes(b"\xff[")

        with pytest.raises(JsonStoreError) as exc_info:
            JsonProductStore(path).read_all()

        assert exc_info.value.code == "READ_FAILED"

    def test_directory_instead_of_file(self, tmp_path):
        with pytest.raises(JsonStoreError) as exc_info:
            JsonProductStore(tmp_path).read_all()

        assert exc_info.value.code == "READ_FAILED"

    def test_error_string_includes_code_and_suggestion(self, tmp_path):
        with pytest.raises(JsonStoreError) as exc_info:
            JsonProductStore(tmp_path / "missing.json").read_all()

        text = str(exc_info.value)
        assert text.startswith("[FILE_NOT_FOUND]")
        assert "Suggestion:" in text


class TestWriteAll:
    """Test rewriting the backing file."""

    def test_replaces_contents(self, store, data_file):
        records = [{"id": 1, "name": "Pen", "price": 10}]

        store.write_all(records)

        assert json.loads(data_file.read_text(encoding="utf-8")) == records
        assert store.read_all() == records

    def test_creates_file_when_missing(self, tmp_path):
        store = JsonProductStore(tmp_path / "new.json")
        assert not store.exists()

        store.write_all([])

        assert store.exists()
        assert store.read_all() == []

    def test_keeps_non_ascii_text(self, store, data_file):
        store.write_all([{"id": 1, "name": "Café crème", "price": 3.2}])

        assert "Café crème" in data_file.read_text(encoding="utf-8")

    def test_leaves_no_temporary_files(self, store, data_file):
        store.write_all([{"id": 1, "name": "Pen", "price": 10}])

        assert [p.name for p in data_file.parent.iterdir()] == [data_file.name]

    def test_missing_directory(self, tmp_path):
        store = JsonProductStore(tmp_path / "no-such-dir" / "products.json")

        with pytest.raises(JsonStoreError) as exc_info:
            store.write_all([])

        assert exc_info.value.code == "WRITE_FAILED"
