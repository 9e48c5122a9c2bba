"""Session storage and identity lookup"""

import json
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from billed.schemas.user import UserIdentity

USER_KEY = "user"
TOKEN_KEY = "jwt"


class SessionStore(Protocol):
    """Persistent key-value store written at login (browser localStorage semantics)."""

    def get_item(self, key: str) -> Optional[str]:
        ...


class SessionProvider(Protocol):
    def current_user(self) -> UserIdentity:
        ...

    def access_token(self) -> Optional[str]:
        ...


class LocalStorage:
    """
    String key-value store. When a path is given every write is flushed to it
    as a JSON object, and an existing file is loaded on construction.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self._path = Path(path) if path else None
        self._items: Dict[str, str] = {}
        if self._path and self._path.exists():
            self._items = {
                str(k): str(v) for k, v in json.loads(self._path.read_text(encoding="utf-8")).items()
            }

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)
        self._flush()

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)
        self._flush()

    def clear(self) -> None:
        self._items = {}
        self._flush()

    def _flush(self) -> None:
        if self._path:
            self._path.write_text(json.dumps(self._items), encoding="utf-8")


class StoreSessionProvider:
    """Reads the logged-in identity from a SessionStore; never writes to it."""

    def __init__(self, store: SessionStore):
        self.store = store

    def current_user(self) -> UserIdentity:
        """
        Decode the "user" entry.

        Raises:
            LookupError: nobody is logged in
        """
        raw = self.store.get_item(USER_KEY)
        if raw is None:
            raise LookupError("No user in session")
        return UserIdentity.model_validate_json(raw)

    def access_token(self) -> Optional[str]:
        return self.store.get_item(TOKEN_KEY)
