from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..core.exceptions import StorageError
from .store import DocumentStore, StoredDocument


class InMemoryStore(DocumentStore):
    """Dict-backed store used by tests and throwaway runs.

    Documents are kept as serialized JSON so callers never share mutable state,
    matching what a file round-trip does.
    """

    def __init__(self, documents: Optional[Dict[str, Any]] = None):
        self._docs: Dict[str, str] = {}
        for name, doc in (documents or {}).items():
            self.put(name, doc)

    def get(self, collection: str) -> StoredDocument:
        raw = self._docs.get(collection)
        if raw is None:
            return StoredDocument.empty()
        return StoredDocument.populated(json.loads(raw))

    def put(self, collection: str, document: Any) -> None:
        try:
            self._docs[collection] = json.dumps(document)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Cannot serialize {collection}: {e}") from e

    def raw(self, collection: str) -> Any:
        """Peek at a stored document without going through a repository."""
        raw = self._docs.get(collection)
        return None if raw is None else json.loads(raw)

    def __contains__(self, collection: str) -> bool:
        return collection in self._docs
