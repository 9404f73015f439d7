from __future__ import annotations

from typing import Optional

from ..core.enums import Collection
from ..storage.store import DocumentStore
from .repository import SettingsRepository


class JsonSettingsRepository(SettingsRepository):
    def __init__(self, store: DocumentStore):
        self._store = store

    def get(self) -> Optional[dict]:
        stored = self._store.get(Collection.SETTINGS.value)
        return None if stored.is_empty else stored.document

    def save(self, settings: dict) -> None:
        self._store.put(Collection.SETTINGS.value, settings)
