"""Repository fakes used by the tests."""

from typing import Iterable, List

from user_endpoint_api.app.core.errors import PersistenceError
from user_endpoint_api.app.schemas.user import User


class RecordingRepository:
    """Repository fake that records calls.

    ``find_all`` returns ``listing`` as is; batches are prepended so the
    native order differs from id order.
    """

    def __init__(self, listing: Iterable[User] = ()) -> None:
        self.listing: List[User] = list(listing)
        self.save_calls: List[User] = []
        self.save_all_calls: List[List[User]] = []
        self._next_id = max((u.id for u in self.listing if u.id is not None), default=0) + 1

    def _assign(self, user: User) -> User:
        stored = User(id=user.id if user.id is not None else self._next_id, name=user.name)
        self._next_id = max(self._next_id, stored.id + 1)
        return stored

    def save(self, user: User) -> User:
        self.save_calls.append(user)
        stored = self._assign(user)
        self.listing = [u for u in self.listing if u.id != stored.id] + [stored]
        return stored

    def save_all(self, users: Iterable[User]) -> None:
        batch = list(users)
        self.save_all_calls.append(batch)
        for user in batch:
            self.listing.insert(0, self._assign(user))

    def find_all(self) -> List[User]:
        return list(self.listing)


class FailingRepository:
    """Repository whose every call fails like a broken database."""

    def save(self, user):
        raise PersistenceError("disk full")

    def save_all(self, users):
        raise PersistenceError("disk full")

    def find_all(self):
        raise PersistenceError("disk full")
