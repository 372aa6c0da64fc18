import json

import pytest

from dsa_mentor.assistance import ResponseStore
from dsa_mentor.errors import PersistenceError


def test_save_then_load_round_trip(storage_path):
    store = ResponseStore(storage_path)

    assert store.save(3, "Number of Islands", "Count the connected land.", "cpp") is True

    record = store.load()
    assert record.question_index == 3
    assert record.language == "cpp"
    assert record.language_display == "C++"
    assert record.title == "Number of Islands"
    assert record.response == "Count the connected land."
    assert record.timestamp


def test_save_sanitizes_before_persisting(storage_path):
    store = ResponseStore(storage_path)
    store.save(0, "Two Sum", "Think first.\n```python\nprint(1)\n```\nThen plan.", "python")

    record = store.load()
    assert "```" not in record.response
    assert "print" not in record.response


def test_file_layout_uses_camel_case_keys(storage_path):
    ResponseStore(storage_path).save(1, "Valid Parentheses", "Use a stack.", "java")

    data = json.loads(storage_path.read_text(encoding="utf-8"))
    assert data["questionIndex"] == 1
    assert data["languageDisplay"] == "Java"
    assert data["response"] == "Use a stack."


def test_save_overwrites_single_slot(storage_path):
    store = ResponseStore(storage_path)
    store.save(0, "Two Sum", "The first response.", "python")
    store.save(1, "Valid Parentheses", "The second response.", "c")

    record = store.load()
    assert (record.question_index, record.language, record.response) == (1, "c", "The second response.")


def test_load_without_file_returns_none(storage_path):
    assert ResponseStore(storage_path).load() is None
    assert not storage_path.parent.exists()


def test_save_creates_storage_directory(storage_path):
    ResponseStore(storage_path).save(0, "Two Sum", "text", "python")
    assert storage_path.exists()


def test_clear_without_file_reports_missing(storage_path):
    assert ResponseStore(storage_path).clear() is False


def test_clear_writes_empty_record(storage_path):
    store = ResponseStore(storage_path, default_language="java")
    store.save(0, "Two Sum", "text", "python")

    assert store.clear() is True
    assert store.load() is None

    data = json.loads(storage_path.read_text(encoding="utf-8"))
    assert data["questionIndex"] == -1
    assert data["language"] == "java"
    assert data["response"] == ""


def test_corrupt_file_raises_persistence_error(storage_path):
    storage_path.parent.mkdir(parents=True)
    storage_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PersistenceError):
        ResponseStore(storage_path).load()


def test_save_failure_returns_false(tmp_path):
    # A directory where the file should be makes the write fail
    target = tmp_path / "PAResponse.json"
    target.mkdir()

    assert ResponseStore(target).save(0, "Two Sum", "text", "python") is False
