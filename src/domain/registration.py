"""
Registration domain service - ordered admission rules.

This module contains the core business logic for deciding whether a
new user may register.

Rule Order (fixed, each rule returns early)
===========================================

1. Duplicate check  -> ALREADY_REGISTERED
2. Domain check     -> WRONG_DOMAIN
3. Daily quota      -> TOO_MANY_REGISTRATIONS_TODAY
4. Welcome email    -> OK

A known address is reported as ALREADY_REGISTERED even when its domain
is wrong. An address with the wrong domain never reaches the shared
daily counter.

Collaborator exceptions (UserDirectoryUnavailable, NotificationFailed)
propagate to the caller unchanged.
"""

import logging
from dataclasses import dataclass

from .ports import Notifier, RegistrationOutcome, UserDirectory

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Holds references to its collaborators and the two admission
    parameters; no other state is kept between calls.
    """

    user_directory: UserDirectory
    notifier: Notifier
    allowed_domain: str
    daily_limit: int

    def register(self, email: str) -> RegistrationOutcome:
        """
        Decide whether the email may be registered.

        Args:
            email: Email address, passed unchanged to collaborators

        Returns:
            RegistrationOutcome for this attempt
        """
        if self.user_directory.user_exists(email):
            logger.info(
                "Registration rejected: %s (%s)",
                email,
                RegistrationOutcome.ALREADY_REGISTERED.value,
            )
            return RegistrationOutcome.ALREADY_REGISTERED

        if not self._has_allowed_domain(email):
            logger.info(
                "Registration rejected: %s (%s)", email, RegistrationOutcome.WRONG_DOMAIN.value
            )
            return RegistrationOutcome.WRONG_DOMAIN

        if self.user_directory.get_registered_count_today() > self.daily_limit:
            logger.info(
                "Registration rejected: %s (%s)",
                email,
                RegistrationOutcome.TOO_MANY_REGISTRATIONS_TODAY.value,
            )
            return RegistrationOutcome.TOO_MANY_REGISTRATIONS_TODAY

        self.notifier.send_welcome_email(email)
        logger.info("Registration accepted: %s", email)
        return RegistrationOutcome.OK

    def _has_allowed_domain(self, email: str) -> bool:
        """
        Compare the part after the last "@" with the allowed domain.

        The comparison is exact, matching how the directory keys addresses.
        An address without "@" has an empty domain and never matches.
        """
        _, at, domain = email.rpartition("@")
        if not at:
            return False
        return domain == self.allowed_domain
