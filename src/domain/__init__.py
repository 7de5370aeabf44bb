"""
Domain layer - Pure business logic with zero framework imports.

This package contains the registration admission rules. It defines its
own port interfaces for collaborator abstraction, keeping the decision
logic decoupled from storage and email transport.
"""

from .exceptions import NotificationFailed, RegistrationError, UserDirectoryUnavailable
from .ports import Notifier, RegistrationOutcome, UserDirectory
from .registration import RegistrationService

__all__ = [
    "NotificationFailed",
    "Notifier",
    "RegistrationError",
    "RegistrationOutcome",
    "RegistrationService",
    "UserDirectory",
    "UserDirectoryUnavailable",
]
