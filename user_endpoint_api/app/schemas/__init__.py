"""
Pydantic schema definitions for API payloads.

``User`` doubles as the record passed between the service and the
repositories; the request models describe the JSON bodies of the
named operations.
"""

from .user import NewUserRequest, SaveAllRequest, SaveRequest, User

__all__ = ["NewUserRequest", "SaveAllRequest", "SaveRequest", "User"]
