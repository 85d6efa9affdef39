"""
Error types shared by the service and repository layers.

``InvalidArgument`` signals bad caller input and is raised before any
storage is touched.  ``PersistenceError`` is raised by repository
implementations when the underlying storage fails; the service layer
lets it propagate untouched.
"""


class InvalidArgument(ValueError):
    """Raised when a request carries an invalid value."""


class PersistenceError(RuntimeError):
    """Raised by a repository when reading or writing storage fails."""
