"""Tests for the JSON submission store."""

import json

from signpad.core.config import SignpadConfig
from signpad.core.submissions import STORE_KEY, SubmissionStore


def make_record(record_id, name="Kim"):
    return {'id': record_id, 'name': name, 'affiliation': "Council",
            'date': "2024년 3월 5일", 'signatureData': "data:image/png;base64,AAA"}


def test_append_persists(tmp_path):
    path = tmp_path / "store" / "submissions.json"
    store = SubmissionStore(str(path))

    assert store.append(make_record(1))
    assert store.append(make_record(2, "박서준"))

    data = json.loads(path.read_text(encoding='utf-8'))
    assert [r['id'] for r in data[STORE_KEY]] == [1, 2]
    assert data[STORE_KEY][1]['name'] == "박서준"


def test_reload_keeps_records(tmp_path):
    path = tmp_path / "submissions.json"
    SubmissionStore(str(path)).append(make_record(1))

    reloaded = SubmissionStore(str(path))

    assert len(reloaded) == 1
    assert reloaded.all()[0]['id'] == 1


def test_corrupt_file_loads_empty(tmp_path):
    path = tmp_path / "submissions.json"
    path.write_text("{not json", encoding='utf-8')

    store = SubmissionStore(str(path))

    assert store.all() == []


def test_failed_save_rolls_back(tmp_path, monkeypatch):
    store = SubmissionStore(str(tmp_path / "submissions.json"))
    monkeypatch.setattr(store, "save", lambda: False)

    assert not store.append(make_record(1))
    assert len(store) == 0


def test_all_returns_copy(tmp_path):
    store = SubmissionStore(str(tmp_path / "submissions.json"))
    store.append(make_record(1))

    store.all().clear()

    assert len(store) == 1


def test_default_path_follows_config(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))

    store = SubmissionStore()

    assert store.store_path == SignpadConfig().store_path
    assert store.store_path == tmp_path / ".signpad" / "submissions.json"
