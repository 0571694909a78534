"""
Housekeeping service.

Runs every registered housekeeper in order on behalf of the scheduler. A
failing housekeeper is logged and recorded, and the remaining housekeepers
still run; the caller learns about failures from the returned report.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Optional

from tagwarden.housekeeping.base import Housekeeper

logger = logging.getLogger(__name__)


@dataclass
class HousekeepingTaskOutcome:
    """Outcome of a single housekeeper within a run."""

    name: str
    succeeded: bool
    duration_seconds: float
    error: Optional[str] = None
    result: Any = None


@dataclass
class HousekeepingReport:
    """Outcome of a full housekeeping run."""

    outcomes: list[HousekeepingTaskOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """True when every housekeeper completed."""
        return all(outcome.succeeded for outcome in self.outcomes)

    @property
    def failed_tasks(self) -> list[str]:
        """Names of the housekeepers that raised."""
        return [outcome.name for outcome in self.outcomes if not outcome.succeeded]


class HousekeepingService:
    """Runs housekeepers sequentially and reports on each."""

    def __init__(self, housekeepers: Sequence[Housekeeper]) -> None:
        self._housekeepers: tuple[Housekeeper, ...] = tuple(housekeepers)

    @property
    def housekeepers(self) -> tuple[Housekeeper, ...]:
        """Registered housekeepers, in run order."""
        return self._housekeepers

    async def run(self) -> HousekeepingReport:
        """
        Run every housekeeper once.

        Returns
        -------
        HousekeepingReport
            One outcome per housekeeper, in run order.
        """
        logger.info("Running housecleaning tasks")
        report = HousekeepingReport()

        for housekeeper in self._housekeepers:
            name = housekeeper.name or type(housekeeper).__name__
            started = time.perf_counter()
            logger.debug("Starting %s", name)
            try:
                result = await housekeeper.clean()
            except Exception as e:
                logger.exception("Error running housekeeping task: %s", name)
                report.outcomes.append(
                    HousekeepingTaskOutcome(
                        name=name,
                        succeeded=False,
                        duration_seconds=time.perf_counter() - started,
                        error=str(e),
                    )
                )
                continue

            logger.debug("Completed %s", name)
            report.outcomes.append(
                HousekeepingTaskOutcome(
                    name=name,
                    succeeded=True,
                    duration_seconds=time.perf_counter() - started,
                    result=result,
                )
            )

        return report
