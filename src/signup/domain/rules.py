"""
Rule engine - Ordered, short-circuiting field validation.

Each input field owns a chain of rules that is evaluated in declared order.
The first failing rule ends the chain for that field ("bail" semantics) and
its message key becomes the field's error. Later rules are never evaluated.

Rule Catalog
============

    username  1  null/absent                      username_null
    username  2  length outside [4, 32]           username_size
    email     1  null/absent                      email_null
    email     2  not a syntactically valid email  email_invalid
    email     3  already used by an account       email_inuse      (async)
    password  1  null/absent                      password_null
    password  2  length < 6                       password_size
    password  3  missing lower, upper or digit    password_pattern

The catalog is plain data: a tuple of ValidationRule records. Synchronous
checks return a bool; asynchronous checks return an awaitable bool and are
awaited in place, so a failed format check always prevents the uniqueness
lookup from being issued.
"""

import re
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from typing import Any

import email_validator
from email_validator import EmailNotValidError, validate_email

from .ports import Field, MessageKey, UserRepository

_PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])", re.DOTALL)

# Private-network domains such as corp.local are valid syntax.
if "local" in email_validator.SPECIAL_USE_DOMAIN_NAMES:
    email_validator.SPECIAL_USE_DOMAIN_NAMES.remove("local")


@dataclass(frozen=True)
class RuleContext:
    """External state a rule may consult."""

    repository: UserRepository


Check = Callable[[Any, RuleContext], bool | Awaitable[bool]]


@dataclass(frozen=True)
class ValidationRule:
    """One check in a field's rule chain. ``check`` returns True on pass."""

    field: Field
    check: Check
    message_key: MessageKey
    synchronous: bool = True


def _not_null(value: str | None, context: RuleContext) -> bool:
    return value is not None


def _length_between(minimum: int, maximum: int | None = None) -> Check:
    def check(value: str, context: RuleContext) -> bool:
        if len(value) < minimum:
            return False
        return maximum is None or len(value) <= maximum

    return check


def _is_email(value: str, context: RuleContext) -> bool:
    try:
        validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError:
        return False
    return True


async def _email_not_in_use(value: str, context: RuleContext) -> bool:
    return await context.repository.find_by_email(value) is None


def _has_lower_upper_digit(value: str, context: RuleContext) -> bool:
    return _PASSWORD_PATTERN.match(value) is not None


def build_rules(
    username_min_length: int = 4,
    username_max_length: int = 32,
    password_min_length: int = 6,
) -> tuple[ValidationRule, ...]:
    """Build the registration rule catalog with the given length bounds."""
    return (
        ValidationRule(Field.USERNAME, _not_null, MessageKey.USERNAME_NULL),
        ValidationRule(
            Field.USERNAME,
            _length_between(username_min_length, username_max_length),
            MessageKey.USERNAME_SIZE,
        ),
        ValidationRule(Field.EMAIL, _not_null, MessageKey.EMAIL_NULL),
        ValidationRule(Field.EMAIL, _is_email, MessageKey.EMAIL_INVALID),
        ValidationRule(
            Field.EMAIL, _email_not_in_use, MessageKey.EMAIL_INUSE, synchronous=False
        ),
        ValidationRule(Field.PASSWORD, _not_null, MessageKey.PASSWORD_NULL),
        ValidationRule(
            Field.PASSWORD, _length_between(password_min_length), MessageKey.PASSWORD_SIZE
        ),
        ValidationRule(Field.PASSWORD, _has_lower_upper_digit, MessageKey.PASSWORD_PATTERN),
    )


DEFAULT_RULES = build_rules()


class RuleEngine:
    """
    Interpreter for a rule catalog.

    Rules are grouped by field; relative order inside each field is kept
    exactly as given.
    """

    def __init__(self, rules: Iterable[ValidationRule] = DEFAULT_RULES) -> None:
        self._chains: dict[Field, tuple[ValidationRule, ...]] = {}
        for rule in rules:
            self._chains[rule.field] = self._chains.get(rule.field, ()) + (rule,)

    def rules_for(self, field: Field) -> tuple[ValidationRule, ...]:
        """Return the rule chain for a field (empty if it has none)."""
        return self._chains.get(field, ())

    async def evaluate(self, field: Field, value: Any, context: RuleContext) -> MessageKey | None:
        """
        Run a field's rule chain against a raw value.

        Args:
            field: Field whose chain is evaluated
            value: Raw submitted value (may be None)
            context: Collaborators available to asynchronous rules

        Returns:
            The message key of the first failing rule, or None if all pass
        """
        for rule in self.rules_for(field):
            if rule.synchronous:
                passed = rule.check(value, context)
            else:
                passed = await rule.check(value, context)
            if not passed:
                return rule.message_key
        return None
