"""
Roster implementation.

A roster is a named, last-in-first-out collection of non-empty strings.
Rosters are identified by name only: two rosters with the same name are
the same roster, whatever they contain.
"""
from typing import Iterator, List, Tuple

from .exceptions import EmptyCollection, InvalidArgument


class Roster:
    """
    Named LIFO stack of elements.

    Equality and hashing use the name only, so a roster can be used as a
    set member or dictionary key and compared across snapshots.
    """

    def __init__(self, name: str):
        """
        Create an empty roster.

        Args:
            name (str): Roster name, must be a non-empty string

        Raises:
            InvalidArgument: If the name is None, not a string or empty
        """
        if name is None:
            raise InvalidArgument("Cannot create a roster with a null name")
        if not isinstance(name, str):
            raise InvalidArgument(f"Roster name must be a string, got {type(name).__name__}")
        if not name:
            raise InvalidArgument("Cannot create a roster with an empty name")

        self._name = name
        self._elements: List[str] = []

    @property
    def name(self) -> str:
        """Roster name."""
        return self._name

    def push(self, element: str) -> "Roster":
        """
        Add an element on top of the roster.

        Args:
            element (str): Element to add, must be a non-empty string

        Returns:
            Roster: This roster, so pushes can be chained

        Raises:
            InvalidArgument: If the element is None, not a string or empty
        """
        if element is None:
            raise InvalidArgument(f"Cannot add a null element to roster '{self._name}'")
        if not isinstance(element, str):
            raise InvalidArgument(
                f"Roster elements must be strings, got {type(element).__name__}"
            )
        if not element:
            raise InvalidArgument(f"Cannot add an empty element to roster '{self._name}'")

        self._elements.append(element)
        return self

    def pop(self) -> str:
        """
        Remove and return the most recently pushed element.

        Raises:
            EmptyCollection: If the roster has no elements
        """
        if not self._elements:
            raise EmptyCollection(f"Cannot pop from empty roster '{self._name}'")
        return self._elements.pop()

    def size(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        return not self._elements

    def elements(self) -> Tuple[str, ...]:
        """
        Snapshot of the current elements, bottom first.

        Returns:
            Tuple[str, ...]: Elements in storage order (last item is the top)
        """
        return tuple(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[str]:
        return iter(self.elements())

    def __eq__(self, other):
        if not isinstance(other, Roster):
            return NotImplemented
        return self._name == other._name

    def __hash__(self):
        return hash(self._name)

    def __repr__(self):
        return f"Roster(name={self._name!r}, elements={self._elements!r})"
