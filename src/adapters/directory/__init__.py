"""User directory adapters - UserDirectory implementations."""

from .memory import InMemoryUserDirectory

__all__ = ["InMemoryUserDirectory"]
