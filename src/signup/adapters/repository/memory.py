"""
In-memory repository adapter - Implements UserRepository protocol.

Process-local account store for development and tests. It enforces the
same email uniqueness constraint as the database schema: ``create`` checks
and inserts without awaiting in between, so under asyncio it is atomic.
"""

from dataclasses import replace
from itertools import count

from signup.domain.exceptions import EmailAlreadyInUse
from signup.domain.ports import Account


class InMemoryUserRepository:
    """
    Implements UserRepository protocol with a dict keyed by email.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._ids = count(1)

    async def find_by_email(self, email: str) -> Account | None:
        return self._accounts.get(email)

    async def create(self, account: Account) -> Account:
        if account.email in self._accounts:
            raise EmailAlreadyInUse(account.email)
        stored = replace(account, id=next(self._ids))
        self._accounts[stored.email] = stored
        return stored

    async def ping(self) -> None:
        return None

    def accounts(self) -> list[Account]:
        """Snapshot of stored accounts in insertion order."""
        return list(self._accounts.values())
