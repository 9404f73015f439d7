from __future__ import annotations

import logging
from typing import Any, Callable

from ..core.exceptions import NotFoundError
from .store import DocumentStore

logger = logging.getLogger(__name__)


class JsonCollection:
    """One named collection with the load/initialize/save moves every repository needs."""

    def __init__(self, store: DocumentStore, name: str, default_factory: Callable[[], Any]):
        self._store = store
        self._name = name
        self._default_factory = default_factory

    @property
    def name(self) -> str:
        return self._name

    def exists(self) -> bool:
        return not self._store.get(self._name).is_empty

    def load(self) -> Any:
        """Stored document, or a fresh default (not persisted) when the collection is empty."""
        stored = self._store.get(self._name)
        if stored.is_empty:
            return self._default_factory()
        return stored.document

    def load_or_initialize(self) -> Any:
        stored = self._store.get(self._name)
        if stored.is_empty:
            document = self._default_factory()
            logger.info("initializing collection %s", self._name)
            self._store.put(self._name, document)
            return document
        return stored.document

    def require(self, missing_message: str) -> Any:
        stored = self._store.get(self._name)
        if stored.is_empty:
            raise NotFoundError(missing_message)
        return stored.document

    def save(self, document: Any) -> None:
        self._store.put(self._name, document)
