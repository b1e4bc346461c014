"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
Collaborators are created during app lifespan and stored in app.state.
"""

from fastapi import Depends, Header, Request

from signup.config.settings import Settings, get_settings
from signup.domain.hashing import PasswordHasher
from signup.domain.messages import MessageResolver, negotiate_locale
from signup.domain.ports import Translator, UserRepository
from signup.domain.registration import RegistrationService
from signup.domain.rules import RuleEngine, build_rules
from signup.domain.validation import ErrorAggregator


def get_repository(request: Request) -> UserRepository:
    """Get the account repository from app state."""
    return request.app.state.repository


def get_translator(request: Request) -> Translator:
    """Get the translation catalog from app state."""
    return request.app.state.translator


def get_message_resolver(
    translator: Translator = Depends(get_translator),
    settings: Settings = Depends(get_settings),
) -> MessageResolver:
    return MessageResolver(translator=translator, default_locale=settings.default_locale)


def get_locale(
    accept_language: str | None = Header(default=None),
    translator: Translator = Depends(get_translator),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Negotiate the response locale from the Accept-Language header.

    Absent or unrecognized values select the default locale.
    """
    return negotiate_locale(accept_language, translator.locales, settings.default_locale)


def get_registration_service(
    repository: UserRepository = Depends(get_repository),
    messages: MessageResolver = Depends(get_message_resolver),
    settings: Settings = Depends(get_settings),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires the repository, message resolver, hasher and configured rule
    catalog into the domain service.
    """
    rules = build_rules(
        username_min_length=settings.username_min_length,
        username_max_length=settings.username_max_length,
        password_min_length=settings.password_min_length,
    )
    return RegistrationService(
        repository=repository,
        messages=messages,
        hasher=PasswordHasher(rounds=settings.bcrypt_cost),
        aggregator=ErrorAggregator(engine=RuleEngine(rules)),
    )
