"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory repository and bundled translation catalog
- A registration service wired with fast bcrypt settings
"""

import pytest

from signup.adapters.i18n.catalog import JsonTranslationCatalog
from signup.adapters.repository.memory import InMemoryUserRepository
from signup.domain.hashing import PasswordHasher
from signup.domain.messages import MessageResolver
from signup.domain.registration import RegistrationService

# Lowest cost bcrypt accepts; keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def valid_user() -> dict[str, str]:
    """Registration payload that passes every rule."""
    return {"username": "user1", "email": "user1@mail.com", "password": "P4ssword"}


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """Fresh in-memory account store for each test."""
    return InMemoryUserRepository()


@pytest.fixture(scope="session")
def catalog() -> JsonTranslationCatalog:
    """Bundled English and Bengali translation tables."""
    return JsonTranslationCatalog.bundled()


@pytest.fixture
def messages(catalog: JsonTranslationCatalog) -> MessageResolver:
    return MessageResolver(translator=catalog)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def service(
    repository: InMemoryUserRepository, messages: MessageResolver, hasher: PasswordHasher
) -> RegistrationService:
    """Registration service wired with the default rule catalog."""
    return RegistrationService(repository=repository, messages=messages, hasher=hasher)
