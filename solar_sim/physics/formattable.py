"""Formatting capability shared by physics objects."""

from abc import ABC, abstractmethod


class Formattable(ABC):
    """Abstract interface for objects with a human-readable text form."""

    __slots__ = ()

    @abstractmethod
    def format(self) -> str:
        """Return the text representation of this object."""
        pass

    def __str__(self) -> str:
        return self.format()
