"""
Tests for HousekeepingService.

Housekeepers are in-test fakes. Covers run order, per-task outcome
recording, and continuing past a failing housekeeper.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from tagwarden.housekeeping.base import Housekeeper
from tagwarden.housekeeping.service import (
    HousekeepingReport,
    HousekeepingService,
    HousekeepingTaskOutcome,
)

pytestmark = pytest.mark.asyncio


class RecordingHousekeeper(Housekeeper):
    """Appends its name to a shared log when cleaned."""

    def __init__(self, name: str, log: list[str], result: Any = None) -> None:
        self.name = name
        self._log = log
        self._result = result

    async def clean(self) -> Any:
        self._log.append(self.name)
        return self._result


class BrokenHousekeeper(Housekeeper):
    """Always raises."""

    name = "broken"

    async def clean(self) -> Any:
        raise RuntimeError("disk full")


class TestHousekeepingServiceRun:
    """Tests for run()."""

    async def test_runs_housekeepers_in_order(self) -> None:
        log: list[str] = []
        service = HousekeepingService(
            [RecordingHousekeeper("first", log), RecordingHousekeeper("second", log)]
        )

        report = await service.run()

        assert log == ["first", "second"]
        assert [o.name for o in report.outcomes] == ["first", "second"]
        assert report.succeeded is True
        assert report.failed_tasks == []

    async def test_records_housekeeper_result(self) -> None:
        service = HousekeepingService([RecordingHousekeeper("only", [], result=42)])

        report = await service.run()

        outcome = report.outcomes[0]
        assert outcome.succeeded is True
        assert outcome.result == 42
        assert outcome.error is None
        assert outcome.duration_seconds >= 0

    async def test_failure_does_not_stop_later_housekeepers(self) -> None:
        log: list[str] = []
        service = HousekeepingService(
            [
                RecordingHousekeeper("before", log),
                BrokenHousekeeper(),
                RecordingHousekeeper("after", log),
            ]
        )

        report = await service.run()

        assert log == ["before", "after"]
        assert report.succeeded is False
        assert report.failed_tasks == ["broken"]
        failed = report.outcomes[1]
        assert failed.succeeded is False
        assert failed.error == "disk full"

    async def test_failure_is_logged_with_task_name(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        service = HousekeepingService([BrokenHousekeeper()])

        with caplog.at_level(logging.ERROR):
            await service.run()

        assert "Error running housekeeping task: broken" in caplog.text

    async def test_unnamed_housekeeper_reported_by_class_name(self) -> None:
        class Anonymous(Housekeeper):
            async def clean(self) -> None:
                return None

        report = await HousekeepingService([Anonymous()]).run()

        assert report.outcomes[0].name == "Anonymous"

    async def test_no_housekeepers_is_successful(self) -> None:
        report = await HousekeepingService([]).run()

        assert report.outcomes == []
        assert report.succeeded is True

    async def test_exposes_housekeepers(self) -> None:
        keeper = RecordingHousekeeper("k", [])

        service = HousekeepingService([keeper])

        assert service.housekeepers == (keeper,)


class TestHousekeepingReport:
    """Tests for report aggregation."""

    async def test_failed_tasks_lists_only_failures(self) -> None:
        report = HousekeepingReport(
            outcomes=[
                HousekeepingTaskOutcome(name="a", succeeded=True, duration_seconds=0.1),
                HousekeepingTaskOutcome(
                    name="b", succeeded=False, duration_seconds=0.2, error="x"
                ),
            ]
        )

        assert report.failed_tasks == ["b"]
        assert report.succeeded is False
