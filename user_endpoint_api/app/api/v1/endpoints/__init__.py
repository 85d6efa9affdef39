"""
Endpoint subpackage for API v1.

Each module defines an ``APIRouter`` for one named endpoint.  The
routers are aggregated in ``router.py`` at the package level.
"""
