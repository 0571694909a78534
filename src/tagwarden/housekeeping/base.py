"""
Housekeeper interface.

Housekeepers are maintenance tasks run periodically by the housekeeping
service. Each one works over the whole store and takes no input.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Housekeeper(ABC):
    """A parameterless maintenance task."""

    #: Stable task name used in logs and run reports.
    name: str = ""

    @abstractmethod
    async def clean(self) -> Any:
        """Run one maintenance pass, raising on failure."""
        pass
