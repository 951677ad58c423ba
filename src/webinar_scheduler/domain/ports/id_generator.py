"""Port for allocating new unique identifiers."""

from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """Abstract identifier generator."""

    @abstractmethod
    def generate(self) -> str:
        """
        Allocate a new identifier.

        Returns:
            A fresh identifier, unique per call
        """
        pass
