"""
PostgreSQL repository adapter - Implements UserRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 (async) with raw SQL.

Uniqueness Design:
-----------------
The domain's email-in-use rule is a best-effort pre-check. Between that
lookup and the INSERT another attempt may store the same email. The
``UNIQUE (email)`` constraint on the ``users`` table is the source of truth:
a losing INSERT raises ``UniqueViolation``, which is translated into the
domain's ``EmailAlreadyInUse``.
"""

import logging
from dataclasses import replace
from pathlib import Path

from psycopg import errors
from psycopg_pool import AsyncConnectionPool

from signup.domain.exceptions import EmailAlreadyInUse
from signup.domain.ports import Account

logger = logging.getLogger(__name__)


class PostgresUserRepository:
    """
    Implements UserRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: AsyncConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 AsyncConnectionPool for database connections
        """
        self._pool = pool

    async def find_by_email(self, email: str) -> Account | None:
        """
        Fetch the account registered with an exact email address.

        Args:
            email: Email address as submitted

        Returns:
            Matching Account, or None if the email is unused
        """
        sql = """
            SELECT id, username, email, password_hash
            FROM users
            WHERE email = %s
        """

        async with self._pool.connection() as conn, conn.cursor() as cursor:
            await cursor.execute(sql, (email,))
            row = await cursor.fetchone()

        if row is None:
            return None
        return Account(id=row[0], username=row[1], email=row[2], password_hash=row[3])

    async def create(self, account: Account) -> Account:
        """
        Insert a new account.

        Args:
            account: Account with an already-hashed password

        Returns:
            The stored Account carrying its database id

        Raises:
            EmailAlreadyInUse: If the UNIQUE (email) constraint rejects the row
        """
        sql = """
            INSERT INTO users (username, email, password_hash)
            VALUES (%s, %s, %s)
            RETURNING id
        """

        try:
            async with self._pool.connection() as conn, conn.cursor() as cursor:
                await cursor.execute(sql, (account.username, account.email, account.password_hash))
                row = await cursor.fetchone()
        except errors.UniqueViolation as e:
            logger.info("Unique constraint rejected account insert")
            raise EmailAlreadyInUse(account.email) from e

        return replace(account, id=row[0])

    async def ping(self) -> None:
        """Round-trip a trivial query; raises if the database is unreachable."""
        async with self._pool.connection() as conn:
            await conn.execute("SELECT 1")


async def run_migrations(pool: AsyncConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 AsyncConnectionPool instance
    """
    # Structure: src/signup/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parents[4] / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            async with pool.connection() as conn:
                await conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
