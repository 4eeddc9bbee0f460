from datetime import date

import pytest

from student_records.domain import StudentRecord
from student_records.errors import NotFoundError
from student_records.events import EventKind
from student_records.store import RecordStore


def test_list_all_keeps_insertion_order(store, roster):
    for r in roster:
        store.add(r)
    assert store.list_all() == roster
    assert len(store) == 3


def test_add_allows_duplicate_ids(store, ann):
    store.add(ann)
    store.add(ann)
    assert store.list_all() == [ann, ann]


def test_add_emits_info_event(store, observer, ann):
    store.add(ann)
    assert len(observer.events) == 1
    assert observer.events[0].kind is EventKind.info
    assert "Ann" in observer.events[0].message


def test_list_all_returns_copy(store, ann):
    store.add(ann)
    snapshot = store.list_all()
    snapshot.clear()
    assert store.list_all() == [ann]


def test_remove_first_match_only(store):
    a = StudentRecord("A", 5, "a@x", date(2000, 1, 1))
    b = StudentRecord("B", 6, "b@x", date(2000, 1, 2))
    c = StudentRecord("C", 5, "c@x", date(2000, 1, 3))
    for r in (a, b, c):
        store.add(r)

    assert store.remove(5) is True
    assert store.list_all() == [b, c]


def test_remove_missing_id_is_noop_with_warning(store, observer, roster):
    for r in roster:
        store.add(r)
    observer.events.clear()

    assert store.remove(999) is False
    assert store.list_all() == roster

    [event] = observer.events
    assert event.kind is EventKind.warning
    assert "999" in event.message
    assert isinstance(event.cause, NotFoundError)
    assert event.cause.student_id == 999


def test_search_is_case_insensitive_and_name_only(store, roster):
    for r in roster:
        store.add(r)

    names = [r.name for r in store.search("jo")]
    assert names == ["John", "Jolene"]
    assert [r.name for r in store.search("JOL")] == ["Jolene"]


def test_search_without_hits_returns_empty_list(store, roster):
    for r in roster:
        store.add(r)
    assert store.search("xyz") == []


def test_search_empty_term_matches_everything(store, roster):
    for r in roster:
        store.add(r)
    assert store.search("") == roster


def test_extend_appends_without_events(store, observer, roster, ann):
    store.add(ann)
    observer.events.clear()

    assert store.extend(roster) == 3
    assert store.list_all() == [ann] + roster
    assert observer.events == []


def test_report_lines_follow_collection_order(store, roster):
    for r in roster:
        store.add(r)
    assert store.report_lines() == [r.report_line() for r in roster]


def test_store_without_observer_works(ann):
    s = RecordStore()
    s.add(ann)
    assert s.remove(42) is False
    assert list(s) == [ann]


def test_take_raises_the_reported_error(store, observer, ann):
    store.add(ann)
    assert store.take(1) == ann

    with pytest.raises(NotFoundError) as exc:
        store.take(1)
    assert observer.events[-1].cause is exc.value
