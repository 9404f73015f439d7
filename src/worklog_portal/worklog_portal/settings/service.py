from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.validators import require_mapping
from ..core.constants import DEFAULT_SETTINGS
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Global singleton settings; defaults are served (not written) until an admin saves."""

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> dict:
        stored = self._settings.get()
        return dict(DEFAULT_SETTINGS) if stored is None else stored

    def save(self, fields: Mapping[str, Any]) -> dict:
        settings = dict(require_mapping(fields, "settings"))
        self._settings.save(settings)
        logger.info("settings updated: %s", sorted(settings))
        return settings
