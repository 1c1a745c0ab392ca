"""Persistent client-side storage for the access token.

All token stores implement the TokenStore interface. The console keeps the
raw JWT under the ``auth_token`` key; nothing else is stored.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)

AUTH_TOKEN_KEY = "auth_token"


class TokenStore(ABC):
    """Abstract key/value store for the access token."""

    @abstractmethod
    def get(self) -> str | None:
        """Return the stored token, or None when signed out."""
        ...

    @abstractmethod
    def set(self, token: str) -> None:
        """Persist ``token``, replacing any previous one."""
        ...

    @abstractmethod
    def remove(self) -> None:
        """Forget the token. Removing a missing token is a no-op."""
        ...


class MemoryTokenStore(TokenStore):
    """Process-local store. Used by tests and one-shot scripts."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def remove(self) -> None:
        self._token = None


class FileTokenStore(TokenStore):
    """JSON file store, the console's equivalent of browser localStorage.

    The file holds a flat JSON object; only the ``auth_token`` key is used.
    A missing or corrupt file reads as "no token".
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("token_store_read_failed", path=str(self._path), error=str(e))
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data), encoding="utf-8")

    def get(self) -> str | None:
        return self._read().get(AUTH_TOKEN_KEY)

    def set(self, token: str) -> None:
        data = self._read()
        data[AUTH_TOKEN_KEY] = token
        self._write(data)
        logger.debug("token_stored", path=str(self._path))

    def remove(self) -> None:
        data = self._read()
        if data.pop(AUTH_TOKEN_KEY, None) is not None:
            self._write(data)
            logger.debug("token_removed", path=str(self._path))
