"""Localization string tables"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from framtidsbygget.core.content import LOCALIZATION_FILE, freeze, load_json

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "sv"


class LocalizationCatalog:
    """Language metadata plus one nested string table per language code."""

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._languages: dict[str, Mapping[str, Any]] = {}
        self._tables: dict[str, Mapping[str, Any]] = {}

        for code, meta in (data.get("languages") or {}).items():
            self._languages[code] = freeze(dict(meta))
            table = data.get(code)
            if isinstance(table, Mapping):
                self._tables[code] = freeze(dict(table))
            else:
                logger.warning("Language %s has no string table", code)

        defaults = [c for c, m in self._languages.items() if m.get("default")]
        self.default_language = defaults[0] if defaults else FALLBACK_LANGUAGE
        logger.info(
            "Loaded localization: %s (default %s)",
            ", ".join(self._tables),
            self.default_language,
        )

    @classmethod
    def from_content(cls, content_dir: Optional[str | Path] = None) -> LocalizationCatalog:
        return cls(load_json(LOCALIZATION_FILE, content_dir))

    def language(self, code: str) -> Optional[Mapping[str, Any]]:
        return self._languages.get(code)

    def languages(self) -> list[Mapping[str, Any]]:
        return list(self._languages.values())

    def is_available(self, code: str) -> bool:
        meta = self._languages.get(code)
        if meta is None or code not in self._tables:
            return False
        return meta.get("available", True) is not False

    def table(self, code: str) -> Optional[Mapping[str, Any]]:
        return self._tables.get(code)

    def lookup(self, code: str, key: str) -> Any:
        """Raw value at dotted key, None when any segment is missing."""
        value: Any = self._tables.get(code)
        for part in key.split("."):
            if isinstance(value, Mapping) and part in value:
                value = value[part]
            else:
                return None
        return value
