from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import pytest

# Garante que o pacote portal seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from portal.repositories.backends import StorageError, StorageQuotaExceeded  # noqa: E402
from portal.repositories.entities import PortalRepository  # noqa: E402
from portal.repositories.json_storage import JsonFileBackend  # noqa: E402
from portal.repositories.storage import Storage  # noqa: E402


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "nested" / "data.json"


def test_missing_file_reads_as_empty(data_file):
    backend = JsonFileBackend(data_file)
    assert backend.get_item("k") is None
    assert not backend.has_item("k")
    assert backend.keys() == []
    assert not data_file.exists()


def test_set_get_remove(data_file):
    backend = JsonFileBackend(data_file)
    backend.set_item("a", "1")
    backend.set_item("b", '{"x": 2}')
    assert json.loads(data_file.read_text(encoding="utf-8")) == {"a": "1", "b": '{"x": 2}'}
    assert backend.get_item("b") == '{"x": 2}'
    backend.remove_item("a")
    assert backend.keys() == ["b"]


def test_values_survive_a_new_instance(data_file):
    repo = PortalRepository(Storage(JsonFileBackend(data_file)))
    repo.save_read_map("b1", "board", {"item1": 123})
    repo.save_opening_balance("b1", 42)

    reopened = PortalRepository(Storage(JsonFileBackend(data_file)))
    assert reopened.load_read_map("b1", "board") == {"item1": 123}
    assert reopened.load_opening_balance("b1") == 42


def test_corrupt_file_raises_storage_error_but_storage_recovers(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text("{oops", encoding="utf-8")
    backend = JsonFileBackend(data_file)
    with pytest.raises(StorageError):
        backend.get_item("k")
    assert Storage(backend).load("k", ["d"]) == ["d"]
    assert Storage(backend).save("k", [1]) is False


def test_non_string_values_are_read_back_as_json_text(data_file):
    data_file.parent.mkdir(parents=True)
    data_file.write_text(json.dumps({"k": [1, 2]}), encoding="utf-8")
    assert Storage(JsonFileBackend(data_file)).load("k", []) == [1, 2]


def test_quota(data_file):
    backend = JsonFileBackend(data_file, quota=10)
    backend.set_item("k", "12345")
    with pytest.raises(StorageQuotaExceeded):
        backend.set_item("k2", "123456")
    assert backend.keys() == ["k"]


def test_failed_write_keeps_other_buildings_readable(data_file):
    repo = PortalRepository(Storage(JsonFileBackend(data_file)))
    repo.save_dues("b1", {"monthlyFee": 3000, "startMonth": "2025-01", "paymentsByUser": {}})
    repo.save_opening_balance("b1", 500)
    before = data_file.read_bytes()

    # a lone surrogate cannot be encoded as UTF-8
    assert repo.save_read_map("b\udcff", "board", {"p1": 1}) is False

    assert data_file.read_bytes() == before
    assert repo.load_dues("b1")["monthlyFee"] == 3000
    assert repo.load_opening_balance("b1") == 500
    assert repo.save_items("b1", [1]) is True
    assert repo.load_items("b1") == [1]
    assert [p.name for p in data_file.parent.iterdir()] == ["data.json"]


def test_os_error_during_replace_keeps_previous_file(data_file, monkeypatch):
    backend = JsonFileBackend(data_file)
    backend.set_item("a", "1")

    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", boom)
    with pytest.raises(StorageError):
        backend.set_item("b", "2")
    monkeypatch.undo()

    assert backend.keys() == ["a"]
    assert [p.name for p in data_file.parent.iterdir()] == ["data.json"]
