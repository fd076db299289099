"""JSON file key-value store.

The whole key space is held in memory and mirrored to a single JSON file.
Writes go to a temporary file that then replaces the target, so a crash
never leaves a half-written file behind.
"""

import asyncio
import contextlib
import copy
import json
from pathlib import Path
from typing import Any

import logfire

from topten.domain.error import StorageError
from topten.domain.repository.key_value import KeyValueStore


class FileKeyValueStore(KeyValueStore):
    """Key-value store persisted to a local JSON file.

    With ``flush_delay`` of zero every ``set``/``delete`` is written through
    before it returns. With a positive delay, writes are coalesced and flushed
    once the delay elapses; ``close`` always flushes what is pending.
    """

    def __init__(self, path: Path, flush_delay: float = 0.0) -> None:
        """Initialize the store and load any existing file.

        Args:
            path: JSON file to mirror the key space to
            flush_delay: Seconds to coalesce writes for (0 = write through)

        Raises:
            StorageError: If an existing file cannot be read or decoded
        """
        self.path = Path(path)
        self.flush_delay = flush_delay
        self._lock = asyncio.Lock()
        self._dirty = False
        self._flush_task: asyncio.Task | None = None
        self._data: dict[str, Any] = self._load()

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            logfire.info("No existing store file, starting fresh", path=str(self.path))
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logfire.error("Failed to load store file", path=str(self.path), error=str(e))
            raise StorageError(f"Cannot read store file {self.path}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Store file {self.path} does not hold a JSON object")
        logfire.info("Store file loaded", path=str(self.path), keys=len(data))
        return data

    def _write(self) -> None:
        temp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            temp.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
            temp.replace(self.path)
        except (OSError, TypeError, ValueError) as e:
            logfire.error("Failed to write store file", path=str(self.path), error=str(e))
            raise StorageError(f"Cannot write store file {self.path}") from e
        self._dirty = False

    async def get(self, key: str) -> Any | None:
        """Read a value."""
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    async def set(self, key: str, value: Any) -> None:
        """Write a value.

        On a failed write-through the in-memory key space is restored.
        """
        async with self._lock:
            previous = dict(self._data)
            self._data[key] = copy.deepcopy(value)
            try:
                await self._persist()
            except StorageError:
                self._data = previous
                raise

    async def delete(self, key: str) -> None:
        """Remove a key."""
        async with self._lock:
            if key not in self._data:
                return
            previous = dict(self._data)
            del self._data[key]
            try:
                await self._persist()
            except StorageError:
                self._data = previous
                raise

    async def flush(self) -> None:
        """Write pending changes now."""
        async with self._lock:
            if self._dirty:
                self._write()

    async def close(self) -> None:
        """Cancel the pending timer and flush."""
        if self._flush_task and not self._flush_task.done():
            self._flush_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._flush_task
        self._flush_task = None
        await self.flush()
        logfire.info("Store file closed", path=str(self.path))

    async def _persist(self) -> None:
        self._dirty = True
        if self.flush_delay <= 0:
            self._write()
            return
        if self._flush_task is None or self._flush_task.done():
            self._flush_task = asyncio.create_task(self._delayed_flush())

    async def _delayed_flush(self) -> None:
        await asyncio.sleep(self.flush_delay)
        try:
            await self.flush()
        except StorageError:
            logfire.warn("Delayed flush failed, retrying on next write or close")
