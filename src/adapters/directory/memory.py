"""
In-memory user directory adapter - Implements UserDirectory protocol.

This module provides a process-local implementation of the domain's
user directory port. Registrations are kept in a dict keyed by email
with the date they were recorded, so the daily count follows the
injected clock.

Concurrency:
------------
All reads and writes take a single lock. record_registration() is an
atomic check-and-record: two callers racing on the same email get
exactly one True.
"""

import logging
import threading
from collections.abc import Callable
from datetime import date, datetime, timezone

logger = logging.getLogger(__name__)


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class InMemoryUserDirectory:
    """
    Implements UserDirectory protocol with a locked dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, today: Callable[[], date] = _utc_today) -> None:
        """
        Initialize an empty directory.

        Args:
            today: Clock returning the current date; defaults to UTC
        """
        self._today = today
        self._registered_on: dict[str, date] = {}
        self._lock = threading.Lock()

    def user_exists(self, email: str) -> bool:
        with self._lock:
            return email in self._registered_on

    def get_registered_count_today(self) -> int:
        """Count users whose registration date equals the clock's current date."""
        today = self._today()
        with self._lock:
            return sum(1 for day in self._registered_on.values() if day == today)

    def record_registration(self, email: str) -> bool:
        """
        Atomically record a new registration dated today.

        Args:
            email: Email address to record

        Returns:
            True if recorded, False if the email was already registered
        """
        today = self._today()
        with self._lock:
            if email in self._registered_on:
                return False
            self._registered_on[email] = today

        logger.debug("Recorded registration for %s on %s", email, today.isoformat())
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._registered_on)
