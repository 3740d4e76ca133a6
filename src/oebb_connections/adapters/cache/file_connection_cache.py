"""JSON file connection cache implementation."""

from __future__ import annotations

import json
import logging
import os
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from oebb_connections.domain.contracts.connection_cache import ConnectionCacheProtocol
from oebb_connections.domain.models.connection import Connection

logger = logging.getLogger(__name__)

_CONNECTIONS_ADAPTER = TypeAdapter(list[Connection])


class FileConnectionCache(ConnectionCacheProtocol):
    """Last-good-result store persisted as one JSON document.

    Layout: {route_key: {"data": [...connections...], "timestamp": epoch_seconds}}.
    Read and write problems are logged and never raised.
    """

    def __init__(
        self,
        path: str | Path,
        max_age_seconds: float = 300,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the cache.

        Args:
            path: Location of the JSON file (created on first save).
            max_age_seconds: Entries older than this load as empty.
            clock: Wall-clock time source in seconds.
        """
        self._path = Path(path)
        self._max_age_seconds = max_age_seconds
        self._clock = clock

    def _read_document(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Cache retrieval error for {self._path}: {e}")
            return {}
        return document if isinstance(document, dict) else {}

    def save(self, route_key: str, connections: list[Connection]) -> None:
        document = self._read_document()
        document[route_key] = {
            "data": _CONNECTIONS_ADAPTER.dump_python(connections, mode="json"),
            "timestamp": self._clock(),
        }

        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False)
            os.replace(tmp_path, self._path)
        except OSError as e:
            logger.error(f"Cache error writing {self._path}: {e}")

    def load(self, route_key: str) -> list[Connection]:
        entry = self._read_document().get(route_key)
        if not isinstance(entry, dict):
            return []

        timestamp = entry.get("timestamp")
        if not isinstance(timestamp, int | float):
            return []
        if self._clock() - timestamp >= self._max_age_seconds:
            logger.debug(f"Cached connections for {route_key} are stale")
            return []

        try:
            return _CONNECTIONS_ADAPTER.validate_python(entry.get("data", []))
        except ValidationError as e:
            logger.error(f"Cache retrieval error for route {route_key}: {e}")
            return []
