from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Mapping

from hotelres.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class JsonFileSnapshotAdapter:
    """Her koleksiyonu dizin içinde ayrı bir JSON dosyası olarak saklar (rooms.json, ...)."""

    def __init__(self, url: str):
        # Format: file:///path/to/dir
        if url.startswith("file://"):
            self.directory = Path(url[len("file://"):])
        else:
            self.directory = Path(url)
        logger.info(f"JsonFileSnapshotAdapter started. Data directory: {self.directory}")

    def _path(self, name: str) -> Path:
        return self.directory / f"{name}.json"

    def init(self) -> None:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(f"Data directory could not be created: {e}") from e

    def save(self, name: str, items: List[Dict[str, Any]]) -> None:
        path = self._path(name)
        try:
            payload = json.dumps(items, indent=2)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Snapshot could not be encoded: {e}") from e

        # Önce geçici dosyaya yaz, sonra yerine taşı: yarım dosya kalmaz.
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp_path, path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            logger.error(f"Error saving {name}: {e}")
            raise PersistenceError(f"Error saving {name}: {e}") from e

    def save_many(self, snapshots: Mapping[str, List[Dict[str, Any]]]) -> None:
        for name, items in snapshots.items():
            self.save(name, items)

    def load(self, name: str) -> List[Dict[str, Any]]:
        path = self._path(name)
        if not path.exists():
            return []
        try:
            with path.open("r", encoding="utf-8") as fh:
                items = json.load(fh)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading {name}: {e}")
            return []

        if not isinstance(items, list):
            logger.error(f"Error loading {name}: snapshot is not a list")
            return []
        return items
