"""JSON file key-value store implementation.

This module provides the FileKeyValueStore class, which persists entries in a
single JSON document readable only by the current user. The document is read
on every operation so that separate CLI invocations see each other's writes.
"""

import asyncio
import json
import os
import tempfile
from datetime import timedelta
from pathlib import Path
from typing import Any, cast

import structlog

from .base import BaseKeyValueStore
from .helper import expiry_time, is_expired

# Get logger for this module
logger = structlog.get_logger(__name__)

DEFAULT_STORE_PATH = Path("~/.tfx/credentials.json")

_FILE_MODE = 0o600
_DIR_MODE = 0o700


class FileKeyValueStore(BaseKeyValueStore):
    """Key-value store backed by a JSON file."""

    def __init__(self, **kwargs: object) -> None:
        """Initialize the file store.

        Args:
            **kwargs: ``path`` of the JSON document (defaults to
                ~/.tfx/credentials.json), plus the common store options.
        """
        super().__init__(**kwargs)
        path = cast("str | Path | None", kwargs.get("path")) or DEFAULT_STORE_PATH
        self._path = Path(path).expanduser()
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        """Location of the backing JSON document."""
        return self._path

    async def put(
        self,
        key: str,
        value: str,
        ttl: int | timedelta | None = None,
        prefix: str | None = None,
    ) -> None:
        """Store a value with the given key."""
        prefixed_key = self._get_prefixed_key(key, prefix)
        entry = {"value": value, "expires_at": expiry_time(self._normalize_ttl(ttl))}

        async with self._lock:
            entries = await asyncio.to_thread(self._read)
            entries[prefixed_key] = entry
            await asyncio.to_thread(self._write, entries)

    async def get(
        self, key: str, default: str | None = None, prefix: str | None = None
    ) -> str | None:
        """Retrieve a value by key."""
        prefixed_key = self._get_prefixed_key(key, prefix)

        async with self._lock:
            entries = await asyncio.to_thread(self._read)

        entry = entries.get(prefixed_key)
        if entry is None or is_expired(entry.get("expires_at")):
            return default
        return cast("str", entry["value"])

    async def delete(self, key: str, prefix: str | None = None) -> bool:
        """Delete a key-value pair."""
        prefixed_key = self._get_prefixed_key(key, prefix)

        async with self._lock:
            entries = await asyncio.to_thread(self._read)
            if prefixed_key not in entries:
                return False
            del entries[prefixed_key]
            await asyncio.to_thread(self._write, entries)
            return True

    async def exists(self, key: str, prefix: str | None = None) -> bool:
        """Check if a key exists."""
        return await self.get(key, prefix=prefix) is not None

    def _read(self) -> dict[str, dict[str, Any]]:
        if not self._path.exists():
            return {}
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(  # noqa: TRY003
                f"Credential file '{self._path}' is not valid JSON"
            ) from e
        if not isinstance(document, dict):
            raise TypeError(  # noqa: TRY003
                f"Credential file '{self._path}' must contain a JSON object"
            )
        return cast("dict[str, dict[str, Any]]", document.get("entries", {}))

    def _write(self, entries: dict[str, dict[str, Any]]) -> None:
        # Expired entries are dropped whenever the file is rewritten
        live = {k: v for k, v in entries.items() if not is_expired(v.get("expires_at"))}

        self._path.parent.mkdir(mode=_DIR_MODE, parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".credentials-")
        try:
            os.chmod(tmp_name, _FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"entries": live}, f, indent=2, sort_keys=True)
            Path(tmp_name).replace(self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("CREDENTIAL_FILE_WRITTEN", path=str(self._path), entries=len(live))
