"""Tests for the SQLite and in-memory user repositories."""

import threading

import pytest

from user_endpoint_api.app.core.errors import PersistenceError
from user_endpoint_api.app.repositories.user_repository import (
    InMemoryUserRepository,
    SQLiteUserRepository,
    UserRepository,
)
from user_endpoint_api.app.schemas.user import User


@pytest.fixture(params=["memory", "sqlite"])
def repository(request, memory_repository, sqlite_repository):
    if request.param == "memory":
        return memory_repository
    return sqlite_repository


def test_implementations_satisfy_protocol(memory_repository, sqlite_repository):
    assert isinstance(memory_repository, UserRepository)
    assert isinstance(sqlite_repository, UserRepository)


def test_save_assigns_increasing_ids(repository):
    first = repository.save(User(name="a"))
    second = repository.save(User(name="b"))
    assert first.id is not None
    assert second.id > first.id


def test_save_with_existing_id_updates(repository):
    created = repository.save(User(name="old"))
    updated = repository.save(User(id=created.id, name="new"))
    assert updated == User(id=created.id, name="new")
    assert repository.find_all() == [updated]


def test_save_with_unknown_id_inserts_under_that_id(repository):
    saved = repository.save(User(id=42, name="answer"))
    assert saved.id == 42
    following = repository.save(User(name="next"))
    assert following.id > 42


def test_save_does_not_mutate_input(repository):
    transient = User(name="a")
    repository.save(transient)
    assert transient.id is None


def test_save_all_then_find_all(repository):
    repository.save_all([User(name="x"), User(name="y"), User(name="z")])
    assert sorted(u.name for u in repository.find_all()) == ["x", "y", "z"]


def test_find_all_empty(repository):
    assert repository.find_all() == []


class TestSQLiteUserRepository:
    def test_batch_is_rolled_back_on_failure(self, sqlite_repository):
        sqlite_repository.save(User(name="kept"))
        # NOT NULL on ``name`` makes the second row fail.
        with pytest.raises(PersistenceError):
            sqlite_repository.save_all([User(name="lost"), User(name=None)])
        assert [u.name for u in sqlite_repository.find_all()] == ["kept"]

    def test_storage_errors_become_persistence_errors(self, tmp_path):
        repo = SQLiteUserRepository(str(tmp_path / "no_schema.db"))
        with pytest.raises(PersistenceError, match="listing users"):
            repo.find_all()
        with pytest.raises(PersistenceError, match="saving user"):
            repo.save(User(name="a"))

    def test_id_outside_integer_range_is_persistence_error(self, sqlite_repository):
        with pytest.raises(PersistenceError, match="saving user"):
            sqlite_repository.save(User(id=2**63, name="a"))
        with pytest.raises(PersistenceError, match="saving users"):
            sqlite_repository.save_all([User(name="b"), User(id=2**63, name="c")])
        assert sqlite_repository.find_all() == []

    def test_data_survives_new_instance(self, sqlite_repository):
        saved = sqlite_repository.save(User(name="durable"))
        reopened = SQLiteUserRepository(sqlite_repository.db_path)
        assert reopened.find_all() == [saved]


class TestInMemoryUserRepository:
    def test_returned_users_are_copies(self):
        repo = InMemoryUserRepository()
        saved = repo.save(User(name="a"))
        saved.name = "changed"
        assert repo.find_all()[0].name == "a"

    def test_concurrent_saves_get_distinct_ids(self):
        repo = InMemoryUserRepository()

        def worker():
            for _ in range(50):
                repo.save(User(name="t"))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [u.id for u in repo.find_all()]
        assert len(ids) == 200
        assert len(set(ids)) == 200
