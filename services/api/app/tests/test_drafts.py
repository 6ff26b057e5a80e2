import json
from datetime import datetime

import pytest

from app.settings import Settings
from app.storage import (
    DRAFTS_KEY,
    DraftStore,
    JsonFileStorage,
    MemoryStorage,
    format_relative_time,
)

MINUTE = 60 * 1000
HOUR = 60 * MINUTE
DAY = 24 * HOUR


class Clock:
    def __init__(self, start=1_700_000_000_000):
        self.now = start

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def store(clock):
    return DraftStore(MemoryStorage(), clock=clock)


def test_create_then_list(store, clock):
    draft = store.create("https://example.com", "bullets")
    drafts = store.list()
    assert len(drafts) == 1
    assert drafts[0].id == draft.id
    assert drafts[0].content == "https://example.com"
    assert drafts[0].output_format == "bullets"
    assert drafts[0].summary is None
    assert drafts[0].updated_at == clock.now


def test_newest_first_and_unique_ids(store, clock):
    first = store.create("one", "summary")
    clock.now += 1
    second = store.create("two", "tweet", summary="cached")
    assert [d.id for d in store.list()] == [second.id, first.id]
    assert first.id != second.id


def test_update(store, clock):
    draft = store.create("one", "summary")
    clock.now += 5 * MINUTE
    assert store.update(draft.id, summary="result", output_format="thread") is True
    updated = store.get(draft.id)
    assert updated.summary == "result"
    assert updated.output_format == "thread"
    assert updated.content == "one"
    assert updated.updated_at == clock.now


def test_update_unknown(store):
    store.create("one", "summary")
    before = store.list()
    assert store.update("missing", content="x") is False
    assert store.list() == before


def test_delete(store):
    keep = store.create("keep", "summary")
    gone = store.create("gone", "summary")
    assert store.delete(gone.id) is True
    assert [d.id for d in store.list()] == [keep.id]


def test_delete_unknown(store):
    store.create("one", "summary")
    before = store.list()
    assert store.delete("missing") is False
    assert store.list() == before


def test_stored_layout_uses_wire_names(store):
    store.create("one", "summary")
    raw = store.storage.get_item(DRAFTS_KEY)
    assert set(raw[0]) == {"id", "content", "outputFormat", "updatedAt"}


def test_json_file_storage(tmp_path, clock):
    path = tmp_path / "nested" / "drafts.json"
    store = DraftStore(JsonFileStorage(path), clock=clock)
    draft = store.create("persisted", "linkedin", summary="post")

    reopened = DraftStore(JsonFileStorage(path))
    assert reopened.get(draft.id).summary == "post"
    assert json.loads(path.read_text())[DRAFTS_KEY][0]["outputFormat"] == "linkedin"
    assert list(path.parent.iterdir()) == [path]


def test_from_settings(tmp_path):
    store = DraftStore.from_settings(Settings(drafts_path=str(tmp_path / "d.json")))
    assert store.list() == []
    store.create("x", "summary")
    assert (tmp_path / "d.json").exists()


@pytest.mark.parametrize(
    "ago, expected",
    [
        (0, "0 minutes ago"),
        (1 * MINUTE, "1 minute ago"),
        (30 * MINUTE, "30 minutes ago"),
        (59 * MINUTE, "59 minutes ago"),
        (1 * HOUR, "1 hour ago"),
        (5 * HOUR + 10 * MINUTE, "5 hours ago"),
        (23 * HOUR, "23 hours ago"),
    ],
)
def test_format_relative_time_recent(ago, expected):
    now = 1_700_000_000_000
    assert format_relative_time(now - ago, now=now) == expected


def test_format_relative_time_future_clamps():
    now = 1_700_000_000_000
    assert format_relative_time(now + HOUR, now=now) == "0 minutes ago"


def test_format_relative_time_calendar_date():
    now = int(datetime(2025, 6, 20, 12, 0).timestamp() * 1000)
    assert format_relative_time(now - 3 * DAY, now=now) == "Jun 17"


def test_format_relative_time_other_year():
    now = int(datetime(2025, 6, 20, 12, 0).timestamp() * 1000)
    then = int(datetime(2023, 5, 1, 12, 0).timestamp() * 1000)
    assert format_relative_time(then, now=now) == "May 1, 2023"


def test_update_can_clear_summary(store):
    draft = store.create("one", "summary", summary="cached")
    assert store.update(draft.id, summary=None) is True
    assert store.get(draft.id).summary is None
    assert store.get(draft.id).content == "one"


def test_update_omitted_fields_are_kept(store):
    draft = store.create("one", "summary", summary="cached")
    assert store.update(draft.id, content="two") is True
    assert store.get(draft.id).summary == "cached"


def test_update_rejects_unknown_fields(store):
    draft = store.create("one", "summary")
    with pytest.raises(TypeError):
        store.update(draft.id, id="other")
    assert store.get(draft.id) is not None


def test_update_rejects_null_content(store):
    draft = store.create("one", "summary")
    with pytest.raises(ValueError):
        store.update(draft.id, content=None)
    assert store.get(draft.id).content == "one"
