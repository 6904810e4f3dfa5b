"""Localizer - key lookup with interpolation and locale formatting"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any, Mapping, Optional

from .catalog import LocalizationCatalog

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

# sv-SE groups with a no-break space and uses a decimal comma
_NUMBER_SEPARATORS: dict[str, tuple[str, str]] = {
    "sv": ("\u00a0", ","),
    "en": (",", "."),
}
MAX_FRACTION_DIGITS = 3


def interpolate(template: str, params: Optional[Mapping[str, Any]] = None) -> str:
    """Replace {name} placeholders; unknown names stay as written."""
    if not params:
        return template

    def _sub(match: re.Match) -> str:
        name = match.group(1)
        return str(params[name]) if name in params else match.group(0)

    return _PLACEHOLDER.sub(_sub, template)


class Localizer:
    def __init__(
        self, catalog: LocalizationCatalog, language: Optional[str] = None
    ) -> None:
        self._catalog = catalog
        self._language = catalog.default_language
        if language and language != self._language:
            self.set_language(language)

    @property
    def language(self) -> str:
        return self._language

    def t(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Translate key. Falls back to the default language, then to the key itself."""
        value = self._catalog.lookup(self._language, key)
        if value is None and self._language != self._catalog.default_language:
            value = self._catalog.lookup(self._catalog.default_language, key)
        if value is None:
            logger.warning("Translation key not found: %s", key)
            return key
        if not isinstance(value, str):
            logger.warning("Translation value is not a string: %s", key)
            return key
        return interpolate(value, params)

    def set_language(self, code: str) -> bool:
        if not self._catalog.is_available(code):
            logger.error("Language not available: %s", code)
            return False
        self._language = code
        return True

    def current_language(self) -> Mapping[str, Any]:
        return self._catalog.language(self._language) or {"code": self._language}

    def available_languages(self) -> list[Mapping[str, Any]]:
        return [
            meta
            for meta in self._catalog.languages()
            if self._catalog.is_available(meta.get("code", ""))
        ]

    # ── formatting ──

    def format_number(self, number: float) -> str:
        group, decimal = _NUMBER_SEPARATORS.get(self._language, _NUMBER_SEPARATORS["en"])
        negative = number < 0
        text = f"{abs(number):,.{MAX_FRACTION_DIGITS}f}"
        integer, _, fraction = text.partition(".")
        fraction = fraction.rstrip("0")
        integer = integer.replace(",", group)
        result = f"{integer}{decimal}{fraction}" if fraction else integer
        # sv-SE uses a real minus sign
        if negative:
            result = ("\u2212" if self._language == "sv" else "-") + result
        return result

    def format_date(self, value: date | datetime | str) -> str:
        """sv: 2024-01-31, en: 1/31/2024."""
        if isinstance(value, str):
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        if self._language == "sv":
            return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        return f"{value.month}/{value.day}/{value.year}"

    def format_duration(self, seconds: int | float) -> str:
        """h:mm:ss from one hour up, else m:ss (templates in common.*)."""
        total = int(seconds)
        hours, rest = divmod(total, 3600)
        minutes, secs = divmod(rest, 60)
        if hours > 0:
            return self.t(
                "common.duration_hours",
                {"hours": hours, "minutes": f"{minutes:02d}", "seconds": f"{secs:02d}"},
            )
        return self.t("common.duration_minutes", {"minutes": minutes, "seconds": f"{secs:02d}"})
