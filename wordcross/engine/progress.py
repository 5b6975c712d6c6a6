"""Logging-backed progress reporting for the search engines."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ..core.models import Layout
from ..utils.logger import get_logger
from ..utils.pretty import format_layout


LOGGER = get_logger(__name__)

DEFAULT_PROGRESS_INTERVAL = 100_000


class LoggingProgressObserver:
    """Logs found solutions and a heartbeat every ``interval`` iterations."""

    def __init__(
        self,
        interval: int = DEFAULT_PROGRESS_INTERVAL,
        total: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if interval < 1:
            raise ValueError("Progress interval must be positive")
        self.interval = interval
        self.total = total
        self.logger = logger or LOGGER
        self.solutions_seen = 0

    def found_solution(self, layout: Layout, crossings: int, iteration: int) -> None:
        self.solutions_seen += 1
        self.logger.info(
            "Found solution #%d (%d crossings, iteration=%d, %dx%d)",
            self.solutions_seen,
            crossings,
            iteration,
            layout.width,
            layout.height,
        )
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("\n%s", format_layout(layout))

    def next_iteration(self, iteration: int) -> None:
        if iteration == 0 or iteration % self.interval:
            return
        if self.total:
            self.logger.info(
                "Searched %d of %d variants (%.1f%%)",
                iteration,
                self.total,
                iteration / self.total * 100,
            )
        else:
            self.logger.info("Searched %d variants", iteration)


class RecordingObserver:
    """Keeps every event in memory; handy for callers that post-process progress."""

    def __init__(self) -> None:
        self.solutions: List[Tuple[Layout, int, int]] = []
        self.iterations = 0

    def found_solution(self, layout: Layout, crossings: int, iteration: int) -> None:
        self.solutions.append((layout, crossings, iteration))

    def next_iteration(self, iteration: int) -> None:
        self.iterations = iteration + 1
