"""
Business logic for users.

``UserService`` validates incoming users, delegates storage to the
``UserRepository`` it was constructed with and returns listings in a
deterministic order (ascending ``id``).  The only validation rule is
that a user name must be present and non-empty; it is checked on the
raw value, without trimming.
"""

import logging
from typing import Iterable, List, Optional

from ..core.errors import InvalidArgument
from ..repositories.user_repository import UserRepository
from ..schemas.user import User

logger = logging.getLogger(__name__)


def _sort_key(user: User):
    # Unsaved users (no id) go first; persisted data never has them.
    return (user.id is not None, user.id or 0)


class UserService:
    """Validation and delegation layer in front of a ``UserRepository``.

    Every writing operation validates all of its input before the
    repository is called, so a rejected request never causes a partial
    write.  Errors raised by the repository propagate unchanged.
    """

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    @staticmethod
    def _validate_user_name(user_name: Optional[str]) -> None:
        if user_name is None or user_name == "":
            raise InvalidArgument("Username must not be empty")

    def new_user(self, user_name: Optional[str]) -> User:
        """Create and persist a user called ``user_name``."""
        self._validate_user_name(user_name)
        logger.info("Creating user %r", user_name)
        return self.repository.save(User(id=None, name=user_name))

    def save(self, user: User) -> User:
        """Insert ``user``, or update it when it carries an existing id."""
        self._validate_user_name(user.name)
        logger.info("Saving user %s", user.id if user.id is not None else "<new>")
        return self.repository.save(user)

    def save_all(self, users: Iterable[User]) -> List[User]:
        """Persist a batch of users and return the full, sorted listing.

        ``users`` may be any iterable; it is consumed exactly once.  The
        first user with an invalid name aborts the call before anything
        is written.
        """
        batch: List[User] = []
        for user in users:
            self._validate_user_name(user.name)
            batch.append(user)
        logger.info("Saving batch of %d users", len(batch))
        self.repository.save_all(batch)
        return self.get_all()

    def get_all(self) -> List[User]:
        """Return all users ordered by ascending id."""
        users = list(self.repository.find_all())
        users.sort(key=_sort_key)
        logger.debug("Listing %d users", len(users))
        return users
