"""
Error aggregator - Runs every field's rule chain and collects failures.

Field failures are independent: a failing username never stops the email
or password chains from running. The resulting FieldErrorMap holds one
message key per failing field, keyed in field declaration order.
"""

from dataclasses import dataclass, field

from .ports import Field, MessageKey
from .rules import RuleContext, RuleEngine

FieldErrorMap = dict[Field, MessageKey]


@dataclass(frozen=True)
class RegistrationRequest:
    """Candidate registration as received from the boundary. Never persisted."""

    username: str | None = None
    email: str | None = None
    password: str | None = None

    def value_of(self, name: Field) -> str | None:
        return getattr(self, name.value)


@dataclass
class ErrorAggregator:
    """Validates a whole RegistrationRequest with a RuleEngine."""

    engine: RuleEngine = field(default_factory=RuleEngine)

    async def validate(self, request: RegistrationRequest, context: RuleContext) -> FieldErrorMap:
        """
        Collect the first failing message key of every field.

        Returns:
            Ordered mapping of failing fields to message keys; empty on success
        """
        errors: FieldErrorMap = {}
        for name in Field:
            key = await self.engine.evaluate(name, request.value_of(name), context)
            if key is not None:
                errors[name] = key
        return errors
