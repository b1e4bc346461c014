"""
Credential hasher - One-way password digests.

Passwords are hashed with bcrypt: salted per call and deliberately slow.
Two digests of the same password differ, but both verify against it.
"""

import logging
from dataclasses import dataclass

import bcrypt

from .exceptions import CredentialHashingError

logger = logging.getLogger(__name__)

# bcrypt only reads the first 72 bytes; bcrypt>=5 rejects longer input outright.
_BCRYPT_MAX_BYTES = 72


def _encode(plaintext: str) -> bytes:
    return plaintext.encode()[:_BCRYPT_MAX_BYTES]


@dataclass(frozen=True)
class PasswordHasher:
    """bcrypt hasher with a fixed cost factor."""

    rounds: int = 10

    def hash(self, plaintext: str) -> str:
        """
        Derive a bcrypt digest for storage.

        Raises:
            CredentialHashingError: If bcrypt rejects the input or cost factor
        """
        try:
            return bcrypt.hashpw(_encode(plaintext), bcrypt.gensalt(rounds=self.rounds)).decode()
        except (ValueError, TypeError) as e:
            logger.error("Password hashing failed: %s", type(e).__name__)
            raise CredentialHashingError("password digest could not be derived") from e

    def verify(self, plaintext: str, digest: str) -> bool:
        """Check a plaintext password against a stored digest (constant-time)."""
        return bcrypt.checkpw(_encode(plaintext), digest.encode())
