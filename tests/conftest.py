"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Mocked user directory and notifier ports
- A registration service wired with the reference rules
  (allowed domain "gmail.com", daily limit 10)
"""

from unittest.mock import Mock

import pytest

from src.domain.registration import RegistrationService

ALLOWED_DOMAIN = "gmail.com"
DAILY_LIMIT = 10


@pytest.fixture
def directory() -> Mock:
    """User directory mock: nobody registered, zero registrations today."""
    directory = Mock()
    directory.user_exists.return_value = False
    directory.get_registered_count_today.return_value = 0
    return directory


@pytest.fixture
def notifier() -> Mock:
    """Notifier mock."""
    return Mock()


@pytest.fixture
def service(directory: Mock, notifier: Mock) -> RegistrationService:
    """Registration service with mocked collaborators."""
    return RegistrationService(
        user_directory=directory,
        notifier=notifier,
        allowed_domain=ALLOWED_DOMAIN,
        daily_limit=DAILY_LIMIT,
    )
