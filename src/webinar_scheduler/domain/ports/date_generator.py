"""Port for reading the current time."""

from abc import ABC, abstractmethod
from datetime import datetime


class DateGenerator(ABC):
    """Abstract clock."""

    @abstractmethod
    def now(self) -> datetime:
        """
        Get the current instant.

        Returns:
            Timezone-aware current timestamp
        """
        pass
