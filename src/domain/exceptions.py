"""
Domain exceptions - Semantic error types for collaborator failures.

Business rejections are RegistrationOutcome values, not exceptions.
These types communicate infrastructure failures without leaking
adapter details, and are never mapped onto a business outcome.

RegistrationService never raises them itself. Port adapters that can
fail must raise them; the bundled in-memory directory and console
notifier cannot fail and never do.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class UserDirectoryUnavailable(RegistrationError):
    """User directory could not answer an existence or quota query."""

    pass


class NotificationFailed(RegistrationError):
    """Notifier could not accept the welcome email."""

    pass
