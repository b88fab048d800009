"""
Exceptions raised by the roster package.

All errors are precondition violations reported synchronously to the caller.
"""


class RosterError(Exception):
    """Base class for roster errors."""


class InvalidArgument(RosterError, ValueError):
    """Raised when a name, element, capacity or roster argument is not acceptable."""


class EmptyCollection(RosterError, IndexError):
    """Raised when popping from a roster that has no elements."""
