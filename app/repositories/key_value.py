"""Local key-value storage backends."""

from __future__ import annotations

import json
import os
from pathlib import Path

import structlog

from app.core.exceptions import InfrastructureError
from app.repositories.interfaces import KeyValueStore

logger = structlog.get_logger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class FileKeyValueStore(KeyValueStore):
    """Durable store backed by a single JSON object on disk.

    The whole document is rewritten on every change through a temporary file
    and ``os.replace`` so a crash never leaves a half-written file behind.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self._path = Path(path)
        self._data: dict[str, str] = self._load()

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as exc:
            raise InfrastructureError(f"cannot read key-value store: {self._path}") from exc
        if not isinstance(raw, dict):
            raise InfrastructureError(f"key-value store is not a JSON object: {self._path}")
        return {str(k): str(v) for k, v in raw.items()}

    def _commit(self, data: dict[str, str]) -> None:
        """Write ``data`` to disk, then make it the live state."""
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            logger.error("kv_store_write_failed", path=str(self._path), error=str(exc))
            raise InfrastructureError("cannot write key-value store") from exc
        finally:
            tmp.unlink(missing_ok=True)
        self._data = data

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._commit({**self._data, key: value})

    def delete(self, key: str) -> None:
        if key in self._data:
            self._commit({k: v for k, v in self._data.items() if k != key})
