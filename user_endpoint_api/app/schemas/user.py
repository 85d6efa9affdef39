"""
Pydantic models for user data.

``User`` is used both as the domain value handed to repositories and
as the wire representation returned by the endpoint.  ``name`` is
optional at the schema level on purpose: an absent or empty name must
reach ``UserService`` so it can be rejected with ``InvalidArgument``
instead of a generic schema error.

The request models wrap the named parameters of each remote
operation, e.g. ``{"userName": "alice"}`` for ``newUser``.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """A user record.

    ``id`` is ``None`` for users that have not been persisted yet.
    """

    id: Optional[int] = Field(None, examples=[1])
    name: Optional[str] = Field(None, examples=["Alice"])

    model_config = {
        "from_attributes": True,
    }


class NewUserRequest(BaseModel):
    """Parameters of the ``newUser`` operation."""

    userName: Optional[str] = Field(None, examples=["Alice"])


class SaveRequest(BaseModel):
    """Parameters of the ``save`` operation."""

    user: User


class SaveAllRequest(BaseModel):
    """Parameters of the ``saveAll`` operation."""

    users: List[User] = Field(default_factory=list)
