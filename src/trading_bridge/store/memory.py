"""In-memory StateStorage (single-process хост, тесты)."""

from typing import Optional


class InMemoryStorage:
    """Key-value storage в dict."""

    def __init__(self):
        self._data: dict[str, bytes] = {}

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = bytes(value)

    def __contains__(self, key: str) -> bool:
        return key in self._data
