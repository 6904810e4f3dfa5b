"""Localization Core"""

from .catalog import LocalizationCatalog
from .localizer import Localizer, interpolate

__all__ = ["LocalizationCatalog", "Localizer", "interpolate"]
