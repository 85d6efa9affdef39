"""
Top-level package for the User Endpoint API.

This file makes ``user_endpoint_api`` a package so that modules within
``app`` can be imported using fully qualified names like
``user_endpoint_api.app.main``.  All functionality lives in submodules
under ``app``.
"""

__all__ = []
