"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Field(str, Enum):
    """
    Registration input fields, in declaration order.

    The declaration order is the order of keys in every FieldErrorMap,
    independent of which fields actually failed.
    """

    USERNAME = "username"
    EMAIL = "email"
    PASSWORD = "password"


class MessageKey(str, Enum):
    """
    Language-neutral identifiers for every user-facing message.

    The key set is closed: each key must exist in every translation table.
    """

    USERNAME_NULL = "username_null"
    USERNAME_SIZE = "username_size"
    EMAIL_NULL = "email_null"
    EMAIL_INVALID = "email_invalid"
    EMAIL_INUSE = "email_inuse"
    PASSWORD_NULL = "password_null"
    PASSWORD_SIZE = "password_size"
    PASSWORD_PATTERN = "password_pattern"
    USER_CREATE_SUCCESS = "user_create_success"


@dataclass(frozen=True)
class Account:
    """Persisted user account. Only ever holds a password digest."""

    username: str
    email: str
    password_hash: str
    id: int | None = None


class UserRepository(Protocol):
    """Port interface for account persistence."""

    async def find_by_email(self, email: str) -> Account | None:
        """
        Look up an account by its exact email address.

        Args:
            email: Email address as submitted

        Returns:
            The stored Account, or None if no account uses this email
        """
        ...

    async def create(self, account: Account) -> Account:
        """
        Persist a new account.

        Implementations MUST enforce email uniqueness themselves; the
        validation pre-check is not transactional.

        Args:
            account: Account carrying an already-hashed password

        Returns:
            The stored Account (with storage-assigned id where available)

        Raises:
            EmailAlreadyInUse: If another account already uses the email
        """
        ...

    async def ping(self) -> None:
        """
        Check that the backing store is reachable.

        Raises:
            Exception: Whatever the store raises when it cannot be reached
        """
        ...


class Translator(Protocol):
    """Port interface for translation table lookup."""

    @property
    def locales(self) -> Iterable[str]:
        """Locale tags that have a translation table."""
        ...

    def translate(self, key: str, locale: str) -> str:
        """
        Translate a message key into the given locale.

        Raises:
            KeyError: If the key has no entry in the locale's table
        """
        ...
