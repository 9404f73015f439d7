from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

from ..core.exceptions import StorageError
from .store import DocumentStore, StoredDocument

logger = logging.getLogger(__name__)


class JsonFileStore(DocumentStore):
    """One ``<collection>.json`` file per collection under ``data_dir``."""

    def __init__(self, data_dir: Union[str, Path]):
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, collection: str) -> Path:
        return self._data_dir / f"{collection}.json"

    def get(self, collection: str) -> StoredDocument:
        path = self.path_for(collection)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return StoredDocument.empty()
        except OSError as e:
            raise StorageError(f"Cannot read {path.name}: {e}") from e

        if not raw.strip():
            return StoredDocument.empty()

        try:
            return StoredDocument.populated(json.loads(raw))
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupt JSON in {path.name}: {e}") from e

    def put(self, collection: str, document: Any) -> None:
        path = self.path_for(collection)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"Cannot write {path.name}: {e}") from e
        logger.debug("wrote %s", path)
