# session_store.py
"""Client-side session state: the auth session and the unread-notification counter.

Both slices are plain objects owned by a ``ClientState``; every mutation is a
synchronous read-modify-write on the client's single event-loop thread, so
there is no locking here.
"""
import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

import config

logger = logging.getLogger(__name__)

AUTH_TOKEN_KEY = "auth-token"

S = TypeVar("S")
Listener = Callable[[Any, Any], None]


# ---------- durable storage backends ----------
class NullTokenStorage:
    """No durable storage (headless / non-interactive runs)."""

    def get(self, key: str) -> Optional[str]:
        return None

    def set(self, key: str, value: str) -> None:
        pass

    def remove(self, key: str) -> None:
        pass


class MemoryTokenStorage:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)


class FileTokenStorage:
    """Key/value pairs in a small JSON file that outlives the process."""

    def __init__(self, path):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(data, f)
        tmp.replace(self.path)

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read()
        except ValueError:
            # unreadable contents are replaced, not kept forever
            data = {}
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


# ---------- slices ----------
class _Slice(Generic[S]):
    """Holds one immutable snapshot and tells subscribers when it is swapped."""

    def __init__(self, initial: S):
        self._state = initial
        self._listeners: List[Listener] = []

    @property
    def state(self) -> S:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(state, previous)`` after every change; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes) -> None:
        previous = self._state
        self._state = replace(previous, **changes)
        for listener in list(self._listeners):
            listener(self._state, previous)


@dataclass(frozen=True)
class AuthState:
    user: Any = None
    token: Optional[str] = None
    is_authenticated: bool = False


class AuthStore(_Slice[AuthState]):
    """Current user and session token; only the token is persisted.

    After a restart the token (and so ``is_authenticated``) comes back but
    ``user`` stays None until someone re-fetches it.
    """

    def __init__(self, storage=None, key: str = AUTH_TOKEN_KEY):
        self.storage = storage if storage is not None else NullTokenStorage()
        self.key = key
        token = self._restore_token()
        super().__init__(AuthState(user=None, token=token, is_authenticated=bool(token)))

    @property
    def user(self):
        return self.state.user

    @property
    def token(self) -> Optional[str]:
        return self.state.token

    @property
    def is_authenticated(self) -> bool:
        return self.state.is_authenticated

    def _restore_token(self) -> Optional[str]:
        try:
            return self.storage.get(self.key)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s from storage, starting logged out: %s", self.key, exc)
            return None

    def login(self, user, token: str) -> None:
        try:
            self.storage.set(self.key, token)
        except (OSError, ValueError) as exc:
            logger.warning("Session token not persisted, keeping it in memory only: %s", exc)
        self._set(user=user, token=token, is_authenticated=True)

    def logout(self) -> None:
        try:
            self.storage.remove(self.key)
        except (OSError, ValueError) as exc:
            logger.warning("Could not remove persisted session token: %s", exc)
        self._set(user=None, token=None, is_authenticated=False)


@dataclass(frozen=True)
class NotificationState:
    unread_count: int = 0


class NotificationStore(_Slice[NotificationState]):
    def __init__(self):
        super().__init__(NotificationState())

    @property
    def unread_count(self) -> int:
        return self.state.unread_count

    def set_unread_count(self, count: int) -> None:
        # stored verbatim, no clamping
        self._set(unread_count=count)

    def increment_unread_count(self) -> None:
        self._set(unread_count=self.state.unread_count + 1)

    def decrement_unread_count(self) -> None:
        self._set(unread_count=max(0, self.state.unread_count - 1))


# ---------- composition root ----------
class ClientState:
    def __init__(self, storage=None):
        self.auth = AuthStore(storage)
        self.notifications = NotificationStore()

    @classmethod
    def from_config(cls, storage_path: Optional[str] = None) -> "ClientState":
        path = config.CLIENT_STORAGE_PATH if storage_path is None else storage_path
        if not path:
            logger.info("No client storage path configured, session will not survive a restart")
            return cls(NullTokenStorage())
        return cls(FileTokenStorage(path))
