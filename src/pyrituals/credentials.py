"""Persisted key-value storage for the account and hub hashes."""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Protocol

from pyrituals._constants import ACCOUNT_HASH_KEY, HUB_HASH_KEY

_logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    """Minimal string store. ``None`` (or ``""``) means the key is absent."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryCredentialStore:
    """In-process store, used by tests and hosts that persist elsewhere."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def clear(self) -> None:
        self._data.clear()


class DirectoryCredentialStore:
    """One UTF-8 file per key inside *path*.

    The directory is created lazily on the first write so that a store
    pointed at a fresh location behaves as empty.
    Methods block on disk I/O; async callers go through :func:`load_key`
    and :func:`save_key`, which run them in a worker thread.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _file(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key in {".", ".."}:
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._path / key

    def get(self, key: str) -> str | None:
        try:
            return self._file(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set(self, key: str, value: str) -> None:
        self._path.mkdir(parents=True, exist_ok=True)
        target = self._file(key)
        tmp = target.with_name(f".{key}.tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(target)
        _logger.debug("Persisted %s to %s", key, self._path)

    def clear(self) -> None:
        for key in (ACCOUNT_HASH_KEY, HUB_HASH_KEY):
            try:
                self._file(key).unlink()
            except FileNotFoundError:
                continue


def read_key(store: CredentialStore, key: str) -> str | None:
    """Read *key*, folding empty strings into ``None``."""
    value = store.get(key)
    if value is None or value == "":
        return None
    return value


async def load_key(store: CredentialStore, key: str) -> str | None:
    """:func:`read_key` in a worker thread, for use from the event loop."""
    return await asyncio.to_thread(read_key, store, key)


async def save_key(store: CredentialStore, key: str, value: str) -> None:
    await asyncio.to_thread(store.set, key, value)
