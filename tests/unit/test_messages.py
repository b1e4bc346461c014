"""
Unit tests for message resolution and locale negotiation.
"""

import logging
from unittest.mock import Mock

import pytest

from signup.adapters.i18n.catalog import JsonTranslationCatalog
from signup.domain.exceptions import UnknownMessageKey
from signup.domain.messages import MessageResolver, negotiate_locale
from signup.domain.ports import MessageKey

SUPPORTED = ("en", "bn")


class TestNegotiateLocale:
    """Tests for Accept-Language negotiation."""

    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            (None, "en"),
            ("", "en"),
            ("bn", "bn"),
            ("BN", "bn"),
            ("bn-BD", "bn"),
            ("en-US,en;q=0.9", "en"),
            ("fr", "en"),
            ("*", "en"),
            ("fr;q=0.9, bn;q=0.8", "bn"),
            ("en;q=0.5, bn", "bn"),
            ("bn;q=0", "en"),
            ("bn;q=abc, en", "en"),
        ],
    )
    def test_negotiate(self, header: str | None, expected: str) -> None:
        """Header values select a supported locale or fall back to the default."""
        assert negotiate_locale(header, SUPPORTED, "en") == expected

    def test_equal_quality_keeps_header_order(self) -> None:
        """Ranges with equal quality are tried in header order."""
        assert negotiate_locale("bn, en", SUPPORTED, "en") == "bn"
        assert negotiate_locale("en, bn", SUPPORTED, "en") == "en"


class TestMessageResolver:
    """Tests for MessageResolver.resolve."""

    @pytest.mark.parametrize("key", list(MessageKey))
    def test_every_key_resolves_in_english(self, messages: MessageResolver, key: MessageKey) -> None:
        """Every message key has English text."""
        text = messages.resolve(key, "en")
        assert text
        assert text != key.value

    @pytest.mark.parametrize("key", list(MessageKey))
    def test_every_key_resolves_in_bengali(self, messages: MessageResolver, key: MessageKey) -> None:
        """Every message key has Bengali text distinct from English."""
        assert messages.resolve(key, "bn") != messages.resolve(key, "en")

    def test_english_texts(self, messages: MessageResolver) -> None:
        """English table carries the expected messages."""
        assert messages.resolve(MessageKey.USERNAME_NULL, "en") == "Username cannot be null"
        assert messages.resolve(MessageKey.EMAIL_INUSE, "en") == "Email in use"
        assert messages.resolve(MessageKey.USER_CREATE_SUCCESS, "en") == "User created"

    def test_accepts_plain_string_keys(self, messages: MessageResolver) -> None:
        """Raw string keys resolve like their enum members."""
        assert messages.resolve("email_invalid", "en") == "Email is not valid"

    def test_unknown_locale_falls_back_to_default(self, messages: MessageResolver) -> None:
        """A locale without a table renders in the default locale."""
        assert messages.resolve(MessageKey.EMAIL_NULL, "de") == "Email cannot be null"

    def test_unknown_key_raises_and_logs(
        self, messages: MessageResolver, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Keys outside the closed set are programming errors."""
        with caplog.at_level(logging.ERROR), pytest.raises(UnknownMessageKey):
            messages.resolve("no_such_key", "en")

        assert "no_such_key" in caplog.text

    def test_key_missing_from_table_raises(self) -> None:
        """A table lacking a known key raises UnknownMessageKey."""
        catalog = JsonTranslationCatalog({"en": {"email_null": "Email cannot be null"}})
        resolver = MessageResolver(translator=catalog)

        with pytest.raises(UnknownMessageKey):
            resolver.resolve(MessageKey.USERNAME_NULL, "en")

    def test_unknown_message_key_is_key_error(self) -> None:
        """UnknownMessageKey can be caught as KeyError."""
        assert issubclass(UnknownMessageKey, KeyError)

    def test_translator_failure_propagates(self) -> None:
        """Translator outages are not masked as unknown keys."""
        translator = Mock()
        translator.locales = ("en",)
        translator.translate.side_effect = RuntimeError("catalog unavailable")
        resolver = MessageResolver(translator=translator)

        with pytest.raises(RuntimeError):
            resolver.resolve(MessageKey.EMAIL_NULL, "en")
