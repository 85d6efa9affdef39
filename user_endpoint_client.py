"""User endpoint API client.

This module defines a small client wrapper around the named
operations of the ``User`` endpoint.  Each operation is invoked with a
``POST`` to ``<base_url>/connect/User/<operation>`` and a JSON body
holding the operation's named parameters.  The client uses the
``requests`` library internally.

The client exposes one method per remote operation:

* :meth:`new_user` – create a user from a name.
* :meth:`save` – insert or update a single user.
* :meth:`save_all` – save a batch and receive the complete listing.
* :meth:`get_all` – list all users ordered by id.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
listings) and ``error`` is a dictionary with keys ``status_code`` and
``message``.  Validation failures come back with status code 400.

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class UserEndpointClient:
    """Client for the ``User`` endpoint of the User Endpoint API."""

    endpoint_name = "User"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` is included in
                all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for the server on each call.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _operation_path(self, operation: str) -> str:
        return f"/connect/{self.endpoint_name}/{operation}"

    def _call(self, operation: str, params: Dict[str, Any]) -> Tuple[Optional[Any], Optional[Error]]:
        """Invoke a named operation.

        Args:
            operation: Operation name, e.g. ``newUser``.
            params: Named parameters sent as the JSON body.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{self._operation_path(operation)}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Calling %s at %s", operation, url)
            response = self.session.post(
                url,
                json=params,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("%s failed (%s): %s", operation, status, message)
            return None, {"status_code": status, "message": str(message)}
        except requests.RequestException as exc:
            logger.error("%s failed: %s", operation, exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def new_user(self, user_name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user called ``user_name``.

        Returns:
            A tuple ``(user, error)``.  ``user`` carries the assigned ``id``.
        """
        return self._call("newUser", {"userName": user_name})

    def save(self, user: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Insert or update a user.

        Args:
            user: A mapping with ``name`` and, for updates, ``id``.
        Returns:
            A tuple ``(user, error)`` with the stored user.
        """
        return self._call("save", {"user": user})

    def save_all(self, users: Iterable[Dict[str, Any]]) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Save several users at once.

        Returns:
            A tuple ``(users, error)``.  On success ``users`` is the full
            listing after the batch, ordered by id.
        """
        data, error = self._call("saveAll", {"users": list(users)})
        if error:
            return [], error
        return data or [], None

    def get_all(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users ordered by id.

        Returns:
            A tuple ``(users, error)``.  ``users`` is empty on failure.
        """
        data, error = self._call("getAll", {})
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None
