"""
Tests for the SQLite backed entity store.
"""

import os
from datetime import datetime, timezone

import pytest

from church_records_api.app.core import db
from church_records_api.app.core.context import init_repositories
from church_records_api.app.core.errors import StoreFailure
from church_records_api.app.core.store import EntityStore
from church_records_api.app.schemas.member import MemberRead


def make_member(member_id: str, name: str = "Ana") -> MemberRead:
    return MemberRead(
        id=member_id,
        name=name,
        contact="a@x.com",
        membership_status="Active",
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def store(repos) -> EntityStore[MemberRead]:
    return repos.members


def test_get_absent_returns_none(store):
    assert store.get("missing") is None
    assert "missing" not in store


def test_insert_then_get(store):
    member = make_member("m1")
    store.insert("m1", member)

    loaded = store.get("m1")
    assert loaded is not None
    assert loaded.model_dump() == member.model_dump()
    assert "m1" in store


def test_insert_overwrites_existing_key(store):
    store.insert("m1", make_member("m1", name="Ana"))
    store.insert("m1", make_member("m1", name="Beatriz"))

    assert store.get("m1").name == "Beatriz"
    assert len(store) == 1


def test_values_in_key_order(store):
    for key in ["c", "a", "b"]:
        store.insert(key, make_member(key))

    assert [m.id for m in store.values()] == ["a", "b", "c"]


def test_values_empty(store):
    assert store.values() == []


def test_remove(store):
    store.insert("m1", make_member("m1"))
    store.remove("m1")

    assert store.get("m1") is None
    assert len(store) == 0


def test_remove_absent_is_noop(store):
    store.insert("m1", make_member("m1"))
    store.remove("other")

    assert len(store) == 1


def test_records_survive_reopen(db_path, repos):
    repos.members.insert("m1", make_member("m1"))

    reopened = init_repositories(db_path)

    assert reopened.members.get("m1").name == "Ana"


def test_collections_are_independent(repos):
    repos.members.insert("shared", make_member("shared"))

    assert repos.events.get("shared") is None
    assert repos.contributions.values() == []


def test_sqlite_errors_become_store_failure(db_path):
    db.init_db(db_path)
    store = EntityStore(db_path, "no_such_table", MemberRead)

    with pytest.raises(StoreFailure) as exc_info:
        store.values()

    assert exc_info.value.operation == "values"
    assert exc_info.value.collection == "no_such_table"


def test_undecodable_row_becomes_store_failure(db_path, store):
    store.insert("good", make_member("good"))
    with db.get_cursor(db_path) as cursor:
        cursor.execute(
            "INSERT INTO members (id, data) VALUES (?, ?)",
            ("bad", '{"id": "bad", "name": null}'),
        )

    with pytest.raises(StoreFailure) as exc_info:
        store.values()
    assert exc_info.value.operation == "decode"

    with pytest.raises(StoreFailure):
        store.get("bad")
    assert store.get("good").name == "Ana"


def test_init_db_is_idempotent(db_path):
    db.init_db(db_path)
    db.init_db(db_path)

    with db.get_cursor(db_path) as cursor:
        versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations")]
        tables = {
            row["name"]
            for row in cursor.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        }

    assert versions == [1]
    assert set(db.COLLECTIONS) <= tables


def test_relative_database_path_resolves_to_absolute():
    path = db.get_database_path("records.db")
    assert os.path.isabs(path)
    assert os.path.basename(path) == "records.db"
