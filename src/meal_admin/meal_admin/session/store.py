from __future__ import annotations

import json
from typing import MutableMapping, Optional

from flask import has_request_context, session as flask_session

from ..common.logger import get_logger
from ..core.constants import SESSION_THEME_KEY, SESSION_TOKEN_KEY, SESSION_USER_KEY
from ..core.enums import Theme
from ..employees.model import Employee

logger = get_logger(__name__)


class SessionStore:
    """Bearer token and cached admin record kept in a key-value storage.

    By default the storage is Flask's signed cookie session of the current
    request. Outside a request (CLI, background rendering) the store is
    "unavailable": reads return None and writes are ignored.
    """

    def __init__(self, storage: Optional[MutableMapping] = None):
        self._storage = storage

    def _backend(self) -> Optional[MutableMapping]:
        if self._storage is not None:
            return self._storage
        if has_request_context():
            return flask_session
        return None

    def save(self, token: str) -> None:
        storage = self._backend()
        if storage is not None:
            storage[SESSION_TOKEN_KEY] = token

    def save_user(self, employee: Employee) -> None:
        storage = self._backend()
        if storage is not None:
            storage[SESSION_USER_KEY] = json.dumps(employee.to_dict())

    def read(self) -> Optional[str]:
        storage = self._backend()
        if storage is None:
            return None
        return storage.get(SESSION_TOKEN_KEY) or None

    def read_user(self) -> Optional[Employee]:
        storage = self._backend()
        if storage is None:
            return None
        raw = storage.get(SESSION_USER_KEY)
        if not raw:
            return None
        try:
            return Employee.from_dict(json.loads(raw))
        except (TypeError, ValueError, AttributeError):
            logger.warning("Discarding unreadable cached user in session")
            return None

    def clear(self) -> None:
        storage = self._backend()
        if storage is None:
            return
        storage.pop(SESSION_TOKEN_KEY, None)
        storage.pop(SESSION_USER_KEY, None)

    # Theme preference survives logout
    def save_theme(self, theme: Theme) -> None:
        storage = self._backend()
        if storage is not None:
            storage[SESSION_THEME_KEY] = theme.value

    def read_theme(self) -> Theme:
        storage = self._backend()
        raw = storage.get(SESSION_THEME_KEY) if storage is not None else None
        try:
            return Theme(raw)
        except ValueError:
            return Theme.LIGHT
