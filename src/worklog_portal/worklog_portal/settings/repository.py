from __future__ import annotations

from typing import Optional, Protocol


class SettingsRepository(Protocol):
    def get(self) -> Optional[dict]:
        """Stored settings document, or None if nothing was ever saved."""

        raise NotImplementedError

    def save(self, settings: dict) -> None:
        raise NotImplementedError
