"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.

Field validation failures are NOT exceptions: they are collected into the
FieldErrorMap by the error aggregator. Only conditions that abort an attempt
(or indicate a programming error) are raised.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class EmailAlreadyInUse(RegistrationError):
    """Persistence rejected the account because the email is already taken."""

    pass


class CredentialHashingError(RegistrationError):
    """The password digest could not be derived."""

    pass


class UnknownMessageKey(RegistrationError, KeyError):
    """A message key has no translation in the resolved table."""

    pass
