"""
Roster manager.

A RosterManager takes a set of provided rosters and turns them into
managed rosters that respect a maximum size:

- Every provided roster gets a managed roster with the same name.
- The elements of each provided roster are shuffled before anything is
  moved, so a different set of surplus elements is picked on every call.
- Surplus elements go first to managed rosters that still have room and,
  once those are full, to as many new rosters as needed.

Provided rosters are never modified.
"""
import random
import logging
import threading
from collections import deque
from typing import Deque, List, Optional, Tuple

from config import settings
from .exceptions import InvalidArgument
from .roster import Roster

logger = logging.getLogger(__name__)

class RosterManager:
    """
    Rebalances provided rosters into managed rosters of bounded size.
    Thread-safe for concurrent registration.
    """

    def __init__(self,
                 capacity: int,
                 extra_roster_prefix: Optional[str] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the roster manager.

        Args:
            capacity (int): Maximum number of elements in any managed roster
            extra_roster_prefix (str, optional): Name prefix for rosters created
                to hold surplus elements
            rng (random.Random, optional): Random source used for shuffling

        Raises:
            InvalidArgument: If capacity is not a positive integer or the
                prefix is empty
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidArgument(f"Roster capacity must be an integer, got {capacity!r}")
        if capacity <= 0:
            raise InvalidArgument(
                f"Roster capacity is {capacity}. It must be greater than zero"
            )

        if extra_roster_prefix is None:
            extra_roster_prefix = settings.AUTOMATIC_ROSTER_PREFIX
        if not extra_roster_prefix:
            raise InvalidArgument("Extra roster prefix must not be empty")

        self._capacity = capacity
        self.extra_roster_prefix = extra_roster_prefix
        self._rng = rng or random
        self._provided: List[Roster] = []
        self._lock = threading.RLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def sources(self) -> Tuple[Roster, ...]:
        """Snapshot of the provided rosters in registration order."""
        with self._lock:
            return tuple(self._provided)

    def __len__(self) -> int:
        with self._lock:
            return len(self._provided)

    def manage(self, roster: Roster) -> "RosterManager":
        """
        Register a provided roster.

        The same roster (by name) can only be registered once.

        Args:
            roster (Roster): Roster to register

        Returns:
            RosterManager: This manager, so registrations can be chained

        Raises:
            InvalidArgument: If roster is None, not a Roster, or already registered
        """
        if roster is None:
            raise InvalidArgument("Cannot manage a null roster")
        if not isinstance(roster, Roster):
            raise InvalidArgument(f"Expected a Roster, got {type(roster).__name__}")

        with self._lock:
            if roster in self._provided:
                raise InvalidArgument(
                    f"Roster '{roster.name}' is already managed. A roster can only be added once"
                )
            self._provided.append(roster)

        return self

    def get_managed_rosters(self) -> Tuple[Roster, ...]:
        """
        Compute the managed rosters.

        Recomputed from scratch on every call, with a fresh shuffle of the
        provided rosters each time.

        Returns:
            Tuple[Roster, ...]: Managed rosters, provided names first, then any
            extra rosters in creation order
        """
        provided = self.sources

        managed = [self._shuffled_copy(roster) for roster in provided]
        leftovers = self._fit_to_capacity(managed)
        overflow = len(leftovers)

        if leftovers:
            self._allocate_within(managed, leftovers)

        extra: List[Roster] = []
        if leftovers:
            taken = {roster.name for roster in provided}
            extra = self._create_rosters_for(leftovers, taken)
            managed.extend(extra)

        logger.debug(
            f"Managed {len(provided)} rosters with capacity {self._capacity}: "
            f"{overflow} surplus elements, {len(extra)} extra rosters"
        )
        return tuple(managed)

    def _shuffled_copy(self, roster: Roster) -> Roster:
        elements = list(roster.elements())
        self._rng.shuffle(elements)

        copy = Roster(roster.name)
        for element in elements:
            copy.push(element)
        return copy

    def _fit_to_capacity(self, managed: List[Roster]) -> Deque[str]:
        """Pop surplus elements off every managed roster into a FIFO queue."""
        leftovers: Deque[str] = deque()
        for roster in managed:
            while self._has_surplus(roster):
                leftovers.append(roster.pop())
        return leftovers

    def _allocate_within(self, managed: List[Roster], leftovers: Deque[str]) -> None:
        # Rosters with no elements are skipped here; they never receive surplus.
        for roster in managed:
            if roster.is_empty():
                continue
            while leftovers and self._has_room(roster):
                roster.push(leftovers.popleft())

    def _create_rosters_for(self, leftovers: Deque[str], taken: set) -> List[Roster]:
        extra = []
        counter = 0
        while leftovers:
            counter += 1
            name = f"{self.extra_roster_prefix}{counter}"
            if name in taken:
                continue

            roster = Roster(name)
            while leftovers and self._has_room(roster):
                roster.push(leftovers.popleft())
            extra.append(roster)

        return extra

    def _has_room(self, roster: Roster) -> bool:
        return roster.size() < self._capacity

    def _has_surplus(self, roster: Roster) -> bool:
        return roster.size() > self._capacity
