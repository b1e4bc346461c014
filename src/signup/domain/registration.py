"""
Registration domain service - Validate, hash, persist.

This module contains the core business logic for user registration.

Registration State Machine
==========================

States:
- RECEIVED: Request parsed from the boundary
- VALIDATING: Every field's rule chain runs (includes the async uniqueness lookup)
- REJECTED: At least one field failed; terminal, carries the localized error map
- ACCEPTED: No field failed; proceeds to hashing and persistence
- PERSISTING: Password hashed, account handed to the repository
- COMPLETED: Account stored; terminal, carries the localized success message

Transitions:
    RECEIVED -> VALIDATING -> REJECTED
    RECEIVED -> VALIDATING -> ACCEPTED -> PERSISTING -> COMPLETED
    PERSISTING -> REJECTED   (repository reports the email taken)

Note: The uniqueness rule is a pre-check, not a lock. Two attempts for the
same email can both pass it; the repository's own unique constraint decides
the winner and the loser is rejected with ``email_inuse``. No retries are
performed here.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from .exceptions import EmailAlreadyInUse
from .hashing import PasswordHasher
from .messages import MessageResolver
from .ports import Account, Field, MessageKey, UserRepository
from .rules import RuleContext
from .validation import ErrorAggregator, FieldErrorMap, RegistrationRequest

logger = logging.getLogger(__name__)


class RegistrationState(str, Enum):
    """Lifecycle states of a single registration attempt."""

    RECEIVED = "RECEIVED"
    VALIDATING = "VALIDATING"
    REJECTED = "REJECTED"
    ACCEPTED = "ACCEPTED"
    PERSISTING = "PERSISTING"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class RegistrationResult:
    """
    Outcome of a registration attempt.

    ``validation_errors`` holds localized text keyed by field name;
    ``error_keys`` holds the same failures as raw message keys.
    """

    state: RegistrationState
    message: str | None = None
    validation_errors: dict[str, str] = field(default_factory=dict)
    error_keys: FieldErrorMap = field(default_factory=dict)
    account: Account | None = None

    @property
    def success(self) -> bool:
        return self.state is RegistrationState.COMPLETED


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    All collaborators are injected at construction; nothing is looked up
    from module-level state.
    """

    repository: UserRepository
    messages: MessageResolver
    hasher: PasswordHasher = field(default_factory=PasswordHasher)
    aggregator: ErrorAggregator = field(default_factory=ErrorAggregator)

    async def register(self, request: RegistrationRequest, locale: str | None = None) -> RegistrationResult:
        """
        Validate a registration request and create the account if it passes.

        Args:
            request: Candidate username/email/password
            locale: Locale for rendered messages (default locale if None)

        Returns:
            COMPLETED result with the success message, or REJECTED result
            with the localized field error map

        Raises:
            CredentialHashingError: If the password digest cannot be derived
            Exception: Repository and translation failures propagate unchanged
        """
        locale = locale or self.messages.default_locale
        self._enter(RegistrationState.RECEIVED)

        self._enter(RegistrationState.VALIDATING)
        errors = await self.aggregator.validate(request, RuleContext(self.repository))
        if errors:
            return self._reject(errors, locale)

        self._enter(RegistrationState.ACCEPTED)
        self._enter(RegistrationState.PERSISTING)
        account = Account(
            username=request.username,
            email=request.email,
            password_hash=self.hasher.hash(request.password),
        )
        try:
            stored = await self.repository.create(account)
        except EmailAlreadyInUse:
            logger.warning("Email was claimed between uniqueness check and persistence")
            return self._reject({Field.EMAIL: MessageKey.EMAIL_INUSE}, locale)

        self._enter(RegistrationState.COMPLETED)
        logger.info("Account created for username %s", stored.username)
        return RegistrationResult(
            state=RegistrationState.COMPLETED,
            message=self.messages.resolve(MessageKey.USER_CREATE_SUCCESS, locale),
            account=stored,
        )

    def _reject(self, errors: FieldErrorMap, locale: str) -> RegistrationResult:
        self._enter(RegistrationState.REJECTED)
        logger.info("Registration rejected: %s", ", ".join(f"{f.value}={k.value}" for f, k in errors.items()))
        return RegistrationResult(
            state=RegistrationState.REJECTED,
            validation_errors={f.value: self.messages.resolve(k, locale) for f, k in errors.items()},
            error_keys=dict(errors),
        )

    def _enter(self, state: RegistrationState) -> None:
        logger.debug("Registration attempt -> %s", state.value)
