"""
Domain layer - Pure business logic with zero framework imports.

This package contains the validation-and-registration pipeline: the rule
engine, the error aggregator, message resolution, credential hashing and
the registration service. It defines its own port interfaces for
infrastructure abstraction, ensuring true hexagonal architecture decoupling.
"""

from .exceptions import (
    CredentialHashingError,
    EmailAlreadyInUse,
    RegistrationError,
    UnknownMessageKey,
)
from .hashing import PasswordHasher
from .messages import MessageResolver, negotiate_locale
from .ports import Account, Field, MessageKey, Translator, UserRepository
from .registration import RegistrationResult, RegistrationService, RegistrationState
from .rules import DEFAULT_RULES, RuleContext, RuleEngine, ValidationRule, build_rules
from .validation import ErrorAggregator, FieldErrorMap, RegistrationRequest

__all__ = [
    "DEFAULT_RULES",
    "Account",
    "CredentialHashingError",
    "EmailAlreadyInUse",
    "ErrorAggregator",
    "Field",
    "FieldErrorMap",
    "MessageKey",
    "MessageResolver",
    "PasswordHasher",
    "RegistrationError",
    "RegistrationRequest",
    "RegistrationResult",
    "RegistrationService",
    "RegistrationState",
    "RuleContext",
    "RuleEngine",
    "Translator",
    "UnknownMessageKey",
    "UserRepository",
    "ValidationRule",
    "build_rules",
    "negotiate_locale",
]
