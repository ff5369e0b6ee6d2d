"""Session adapter – SessionWriter port and an in-memory store."""
from __future__ import annotations

from typing import Any, Protocol

ACCESS_TOKEN_EXPIRATION_KEY = "auth.access_token.expiration"


class SessionWriter(Protocol):
    """Port: write a value under a dotted key path (``"a.b.c"``)."""

    def set(self, path: str, value: Any) -> None: ...


class InMemorySessionStore:
    """Nested-dict session store.

    ``set("auth.access_token.expiration", ts)`` produces
    ``{"auth": {"access_token": {"expiration": ts}}}``. A non-dict value
    sitting on an intermediate key is replaced.
    """

    def __init__(self) -> None:
        self._data: dict[str, Any] = {}

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    def set(self, path: str, value: Any) -> None:
        *parents, leaf = path.split(".")
        node = self._data
        for key in parents:
            child = node.get(key)
            if not isinstance(child, dict):
                child = {}
                node[key] = child
            node = child
        node[leaf] = value

    def get(self, path: str, default: Any = None) -> Any:
        node: Any = self._data
        for key in path.split("."):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node

    def clear(self) -> None:
        self._data.clear()


__all__ = ["ACCESS_TOKEN_EXPIRATION_KEY", "InMemorySessionStore", "SessionWriter"]
