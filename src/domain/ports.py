"""
Port interfaces - Protocol definitions for collaborator abstraction.

This module defines the interfaces (ports) that the registration
domain requires from its collaborators. Adapters implement these protocols.
"""

from enum import Enum
from typing import Protocol


class RegistrationOutcome(Enum):
    """
    Result of a registration attempt.

    Exactly one value is produced per call to RegistrationService.register().
    Rule precedence is fixed, so the values are mutually exclusive:

    1. ALREADY_REGISTERED - email is known to the user directory
    2. WRONG_DOMAIN - email domain is not the allowed domain
    3. TOO_MANY_REGISTRATIONS_TODAY - daily quota exceeded
    4. OK - welcome email sent
    """

    OK = "ok"
    ALREADY_REGISTERED = "already_registered"
    WRONG_DOMAIN = "wrong_domain"
    TOO_MANY_REGISTRATIONS_TODAY = "too_many_registrations_today"


class UserDirectory(Protocol):
    """
    Port interface for user existence and daily quota lookups.

    Adapters backed by something that can be unreachable must raise
    UserDirectoryUnavailable rather than answer False or 0.
    InMemoryUserDirectory cannot fail and never raises it.
    """

    def user_exists(self, email: str) -> bool:
        """
        Check whether an email address is already registered.

        Args:
            email: Email address exactly as given by the caller

        Returns:
            True if the email is registered, False otherwise
        """
        ...

    def get_registered_count_today(self) -> int:
        """
        Count registrations recorded for the current day.

        The "today" boundary (timezone, rollover) is owned by the implementation.

        Returns:
            Non-negative registration count
        """
        ...


class Notifier(Protocol):
    """Port interface for welcome notifications."""

    def send_welcome_email(self, email: str) -> None:
        """
        Send a welcome email to a newly registered address.

        Must not raise for input-shape reasons. Adapters whose transport
        can fail must raise NotificationFailed; ConsoleNotifier never does.

        Args:
            email: Recipient email address
        """
        ...
