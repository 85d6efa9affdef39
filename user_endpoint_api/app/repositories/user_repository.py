"""
Persistence for users.

``UserRepository`` is the capability ``UserService`` depends on.  Two
implementations ship with the application:

* :class:`SQLiteUserRepository` stores users in the SQLite database
  managed by :mod:`user_endpoint_api.app.core.db`.
* :class:`InMemoryUserRepository` keeps users in a dictionary.  It is
  used for ephemeral deployments and as a fake in tests.

Neither implementation orders the result of ``find_all``; ordering is
the service's job.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from typing import Dict, Iterable, List, Protocol, runtime_checkable

from ..core.db import get_cursor
from ..core.errors import PersistenceError
from ..schemas.user import User

logger = logging.getLogger(__name__)


@runtime_checkable
class UserRepository(Protocol):
    """Storage capability consumed by ``UserService``."""

    def save(self, user: User) -> User:
        """Insert or update one user and return the persisted copy.

        A user without ``id`` is inserted and receives a fresh id.  A
        user with an ``id`` replaces the stored record with that id, or
        is inserted under that id if none exists.
        """
        ...

    def save_all(self, users: Iterable[User]) -> None:
        """Persist a batch of users.

        When the call returns, ``find_all`` reflects the whole batch.
        """
        ...

    def find_all(self) -> List[User]:
        """Return every stored user in no particular order."""
        ...


class SQLiteUserRepository:
    """``UserRepository`` backed by a SQLite database file.

    A connection is opened per operation, so one instance can be shared
    by concurrent request threads.  The schema must have been created
    with :func:`~user_endpoint_api.app.core.db.init_db` beforehand.
    """

    def __init__(self, db_path: str) -> None:
        self.db_path = db_path

    def save(self, user: User) -> User:
        try:
            with get_cursor(self.db_path) as cursor:
                user_id = self._write(cursor, user)
                row = cursor.execute(
                    "SELECT id, name FROM users WHERE id = ?", (user_id,)
                ).fetchone()
        except (sqlite3.Error, OverflowError) as e:
            logger.error("Failed to save user %s: %s", user.id, e)
            raise PersistenceError(f"Database error while saving user: {e}") from e
        return self._row_to_user(row)

    def save_all(self, users: Iterable[User]) -> None:
        count = 0
        try:
            # One transaction for the whole batch: all rows or none.
            with get_cursor(self.db_path) as cursor:
                for user in users:
                    self._write(cursor, user)
                    count += 1
        except (sqlite3.Error, OverflowError) as e:
            logger.error("Failed to save batch of users: %s", e)
            raise PersistenceError(f"Database error while saving users: {e}") from e
        logger.debug("Saved batch of %d users", count)

    def find_all(self) -> List[User]:
        try:
            with get_cursor(self.db_path) as cursor:
                rows = cursor.execute("SELECT id, name FROM users").fetchall()
        except (sqlite3.Error, OverflowError) as e:
            logger.error("Failed to list users: %s", e)
            raise PersistenceError(f"Database error while listing users: {e}") from e
        return [self._row_to_user(row) for row in rows]

    @staticmethod
    def _write(cursor: sqlite3.Cursor, user: User) -> int:
        """Insert or update ``user`` and return its id."""
        if user.id is None:
            cursor.execute("INSERT INTO users (name) VALUES (?)", (user.name,))
            if cursor.lastrowid is None:
                raise PersistenceError("Failed to create user: no rowid returned.")
            return int(cursor.lastrowid)
        cursor.execute(
            "UPDATE users SET name = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ?",
            (user.name, user.id),
        )
        if cursor.rowcount == 0:
            cursor.execute(
                "INSERT INTO users (id, name) VALUES (?, ?)", (user.id, user.name)
            )
        return user.id

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(id=int(row["id"]), name=str(row["name"]))


class InMemoryUserRepository:
    """``UserRepository`` keeping users in process memory.

    Ids are assigned from an increasing counter starting at 1.  All
    access goes through a lock so concurrent callers see consistent
    state.
    """

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def save(self, user: User) -> User:
        with self._lock:
            return self._store(user)

    def save_all(self, users: Iterable[User]) -> None:
        with self._lock:
            for user in users:
                self._store(user)

    def find_all(self) -> List[User]:
        with self._lock:
            return [user.model_copy() for user in self._users.values()]

    def _store(self, user: User) -> User:
        user_id = user.id
        if user_id is None:
            user_id = self._next_id
        self._next_id = max(self._next_id, user_id + 1)
        stored = User(id=user_id, name=user.name)
        self._users[user_id] = stored
        return stored.model_copy()
