"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and adapters into routes.
"""

from fastapi import Request

from src.adapters.directory.memory import InMemoryUserDirectory
from src.adapters.smtp.console import ConsoleNotifier
from src.config.settings import get_settings
from src.domain.registration import RegistrationService

# Module-level singleton - ConsoleNotifier is stateless
_notifier = ConsoleNotifier()


def get_user_directory(request: Request) -> InMemoryUserDirectory:
    """
    Get user directory from app state.

    The directory is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.user_directory


def get_notifier() -> ConsoleNotifier:
    """Get console notifier (singleton)."""
    return _notifier


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the directory, notifier and admission settings.
    """
    settings = get_settings()
    return RegistrationService(
        user_directory=get_user_directory(request),
        notifier=get_notifier(),
        allowed_domain=settings.allowed_domain,
        daily_limit=settings.daily_registration_limit,
    )
