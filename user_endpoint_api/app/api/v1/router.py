"""
Top-level router for version 1 of the API.

Endpoints are grouped by name.  Each endpoint module contributes a
router that is mounted under the endpoint's name, so the operation
``newUser`` of endpoint ``User`` lives at ``/User/newUser`` relative to
the prefix chosen in ``main.create_app``.
"""

from fastapi import APIRouter

from .endpoints import user

router = APIRouter()

router.include_router(user.router, prefix="/User", tags=["User"])
