"""
Roster system.

This package provides named LIFO rosters and a manager that rebalances
them to a maximum size.
"""
from .exceptions import EmptyCollection, InvalidArgument, RosterError
from .roster import Roster
from .roster_manager import RosterManager

__all__ = ["Roster", "RosterManager", "RosterError", "InvalidArgument", "EmptyCollection"]
