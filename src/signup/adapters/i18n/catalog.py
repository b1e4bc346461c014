"""
JSON translation catalog adapter - Implements Translator protocol.

Translation tables are flat JSON objects (message key -> text), one file
per locale, named ``<locale>.json``. The bundled tables live in the
``signup.locales`` package.
"""

import json
import logging
from importlib import resources
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonTranslationCatalog:
    """
    Implements Translator protocol over in-memory translation tables.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Tables are loaded once and never mutated afterwards.
    """

    def __init__(self, tables: dict[str, dict[str, str]], default_locale: str = "en") -> None:
        if default_locale not in tables:
            raise ValueError(f"No translation table for default locale {default_locale!r}")
        self._tables = tables
        self._default_locale = default_locale

    @classmethod
    def from_directory(cls, directory: Path, default_locale: str = "en") -> "JsonTranslationCatalog":
        """Load every ``*.json`` table found in a directory."""
        tables = {}
        for path in sorted(Path(directory).glob("*.json")):
            tables[path.stem] = json.loads(path.read_text(encoding="utf-8"))
        logger.info("Loaded translation tables: %s", ", ".join(tables) or "none")
        return cls(tables, default_locale)

    @classmethod
    def bundled(cls, default_locale: str = "en") -> "JsonTranslationCatalog":
        """Load the tables shipped with the package."""
        tables = {}
        for entry in resources.files("signup.locales").iterdir():
            if entry.name.endswith(".json"):
                tables[entry.name.removesuffix(".json")] = json.loads(entry.read_text(encoding="utf-8"))
        return cls(tables, default_locale)

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(self._tables)

    def translate(self, key: str, locale: str) -> str:
        """
        Look up a key, falling back to the default table for unknown locales.

        Raises:
            KeyError: If the key is missing from the selected table
        """
        table = self._tables.get(locale) or self._tables[self._default_locale]
        return table[key]
