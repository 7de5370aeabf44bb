"""
Console notifier adapter - Implements Notifier protocol.

This module provides a console-based implementation of the domain's
notifier port, logging welcome emails to stdout for demo purposes.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleNotifier:
    """
    Implements Notifier protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - prints welcome emails to stdout.
    """

    def send_welcome_email(self, email: str) -> None:
        """
        Log a welcome email to console (simulates email delivery).

        In production, this would be replaced with an SMTP adapter.
        Any string is accepted; the address is logged as given.

        Args:
            email: Recipient email address
        """
        logger.info("[WELCOME] Email: %s", email)
