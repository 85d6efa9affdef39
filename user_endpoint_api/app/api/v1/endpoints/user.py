"""
User endpoint for API v1.

Exposes the four operations of ``UserService`` as named remote
operations.  Each operation is a ``POST`` to
``/connect/User/<operation>`` whose JSON body carries the operation's
named parameters, e.g. ``{"userName": "alice"}`` for ``newUser``.

All operations are open to anonymous callers.  The handlers are plain
functions because the service performs blocking storage calls;
FastAPI runs them in its thread pool.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, status

from user_endpoint_api.app.core.errors import InvalidArgument, PersistenceError
from user_endpoint_api.app.schemas.user import NewUserRequest, SaveAllRequest, SaveRequest, User
from user_endpoint_api.app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_user_service(request: Request) -> UserService:
    """Build a ``UserService`` around the repository owned by the app."""
    return UserService(request.app.state.user_repository)


def _to_http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, InvalidArgument):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    logger.exception("Storage failure in user endpoint")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


@router.post("/newUser", response_model=User)
def new_user(
    payload: NewUserRequest,
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a user with the given name and return the stored record."""
    try:
        return service.new_user(payload.userName)
    except (InvalidArgument, PersistenceError) as e:
        raise _to_http_error(e)


@router.post("/save", response_model=User)
def save(
    payload: SaveRequest,
    service: UserService = Depends(get_user_service),
) -> User:
    """Insert a user, or update it when ``id`` refers to a stored user."""
    try:
        return service.save(payload.user)
    except (InvalidArgument, PersistenceError) as e:
        raise _to_http_error(e)


@router.post("/saveAll", response_model=List[User])
def save_all(
    payload: SaveAllRequest,
    service: UserService = Depends(get_user_service),
) -> List[User]:
    """Save a batch of users.

    Returns the complete user listing after the batch, ordered by id.
    Nothing is saved if any user in the batch has an empty name.
    """
    try:
        return service.save_all(payload.users)
    except (InvalidArgument, PersistenceError) as e:
        raise _to_http_error(e)


@router.post("/getAll", response_model=List[User])
def get_all(
    payload: Optional[dict] = Body(None),
    service: UserService = Depends(get_user_service),
) -> List[User]:
    """Return all users ordered by ascending id."""
    try:
        return service.get_all()
    except PersistenceError as e:
        raise _to_http_error(e)
