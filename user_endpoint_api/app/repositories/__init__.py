"""
Repository layer.

Repositories hide how users are stored.  The service layer only relies
on the ``UserRepository`` protocol, so storage can be swapped without
touching business logic.
"""

from .user_repository import InMemoryUserRepository, SQLiteUserRepository, UserRepository

__all__ = ["InMemoryUserRepository", "SQLiteUserRepository", "UserRepository"]
