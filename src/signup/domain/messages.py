"""
Message resolver - Message keys to localized text.

Keys are resolved to text only at the boundary. The key set is closed, so
an unresolvable key is a programming error rather than a user condition.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from .exceptions import UnknownMessageKey
from .ports import MessageKey, Translator

logger = logging.getLogger(__name__)


def negotiate_locale(accept_language: str | None, supported: Iterable[str], default: str) -> str:
    """
    Pick a supported locale from an Accept-Language header value.

    Language ranges are tried by descending quality; an exact tag wins,
    then its primary subtag (``bn-BD`` -> ``bn``). Falls back to ``default``
    when the header is absent or nothing matches.
    """
    if not accept_language:
        return default

    available = {tag.lower(): tag for tag in supported}
    ranges: list[tuple[float, str]] = []
    for part in accept_language.split(","):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip().lower()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                continue
        if quality > 0:
            ranges.append((quality, tag))

    # sorted() is stable, so equal qualities keep header order
    for _, tag in sorted(ranges, key=lambda r: r[0], reverse=True):
        if tag in available:
            return available[tag]
        primary = tag.split("-", 1)[0]
        if primary in available:
            return available[primary]
    return default


@dataclass
class MessageResolver:
    """Resolves message keys through a Translator with default-locale fallback."""

    translator: Translator
    default_locale: str = "en"

    def resolve(self, key: MessageKey | str, locale: str) -> str:
        """
        Render a message key in the requested locale.

        Raises:
            UnknownMessageKey: If the key is not part of the closed key set
                or missing from the translation table
        """
        table = locale if locale in set(self.translator.locales) else self.default_locale
        try:
            return self.translator.translate(MessageKey(key).value, table)
        except (ValueError, KeyError) as e:
            logger.error("Unresolvable message key %r for locale %r", key, table)
            raise UnknownMessageKey(key) from e
