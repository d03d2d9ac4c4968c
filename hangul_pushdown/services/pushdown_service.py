from __future__ import annotations

import logging
from typing import Optional

from hangul_pushdown.domain.hangul_unicode import Syllable, decompose
from hangul_pushdown.domain.pushdown import pushdown_jongseong_config
from hangul_pushdown.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)


class PushdownService:
    """Apply jongseong pushdown using the stored ruleset preference."""

    def __init__(self, store: Optional[SettingsStore] = None) -> None:
        self._store = store or SettingsStore()

    @property
    def store(self) -> SettingsStore:
        return self._store

    @property
    def extended_default(self) -> bool:
        return self._store.get_extended()

    def pushdown(self, text: str, extended: Optional[bool] = None) -> str:
        """Transform `text`; `extended=None` means use the saved preference."""
        if extended is None:
            extended = self.extended_default
        result = pushdown_jongseong_config(text, extended)
        if logger.isEnabledFor(logging.DEBUG):
            changed = sum(1 for a, b in zip(text, result) if a != b)
            logger.debug(
                "pushdown: %d chars, extended=%s, %d rewritten", len(text), extended, changed
            )
        return result

    def decompose(self, char: str) -> Syllable:
        return decompose(char)
