"""Plumbing shared by the search engines: observers, budgets and results."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Protocol

from ..core.exceptions import SearchLimitReached
from ..core.models import CanonicalKey, Layout


class StopReason(str, Enum):
    """Why a search returned."""

    EXHAUSTED = "exhausted"
    QUOTA = "quota"
    ITERATION_LIMIT = "iteration_limit"
    TIME_LIMIT = "time_limit"


class SearchObserver(Protocol):
    """Receives progress events; carries no control flow back to the engine."""

    def found_solution(self, layout: Layout, crossings: int, iteration: int) -> None:
        ...

    def next_iteration(self, iteration: int) -> None:
        ...


class NullObserver:
    """Observer that ignores every event."""

    def found_solution(self, layout: Layout, crossings: int, iteration: int) -> None:
        return None

    def next_iteration(self, iteration: int) -> None:
        return None


@dataclass
class SearchLimits:
    """Optional budgets checked at every iteration boundary."""

    max_iterations: Optional[int] = None
    time_limit_seconds: Optional[float] = None

    def __post_init__(self) -> None:
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError("max_iterations must be positive")
        if self.time_limit_seconds is not None and self.time_limit_seconds <= 0:
            raise ValueError("time_limit_seconds must be positive")


class SolutionSet:
    """Insertion-ordered, deduplicating store of accepted layouts.

    With ``normalize`` set, layouts are stored in normalized form and two
    layouts that differ only by translation count once.
    """

    def __init__(self, max_solutions: int, normalize: bool = True) -> None:
        self.max_solutions = max_solutions
        self.normalize = normalize
        self._layouts: Dict[CanonicalKey, Layout] = {}

    def key_for(self, layout: Layout) -> CanonicalKey:
        if self.normalize:
            layout = layout.normalized()
        return layout.canonical_key()

    def add(self, layout: Layout) -> Optional[Layout]:
        """Store ``layout``; return the stored form, or ``None`` for a duplicate."""

        if self.normalize:
            layout = layout.normalized()
        key = layout.canonical_key()
        if key in self._layouts:
            return None
        self._layouts[key] = layout
        return layout

    @property
    def full(self) -> bool:
        return len(self._layouts) >= self.max_solutions

    @property
    def layouts(self) -> List[Layout]:
        return list(self._layouts.values())

    def __len__(self) -> int:
        return len(self._layouts)

    def __contains__(self, layout: Layout) -> bool:
        return self.key_for(layout) in self._layouts

    def __iter__(self) -> Iterator[Layout]:
        return iter(self.layouts)


@dataclass
class SearchOutcome:
    solutions: List[Layout]
    iterations: int
    stop_reason: StopReason

    @property
    def exhausted(self) -> bool:
        """True when the whole search space was explored."""
        return self.stop_reason == StopReason.EXHAUSTED


@dataclass
class SearchRun:
    """Mutable bookkeeping for one engine invocation."""

    min_crossings: int
    max_solutions: int
    observer: SearchObserver = field(default_factory=NullObserver)
    limits: SearchLimits = field(default_factory=SearchLimits)
    normalize: bool = True
    clock: Callable[[], float] = time.monotonic
    iterations: int = 0

    def __post_init__(self) -> None:
        validate_search_arguments(self.min_crossings, self.max_solutions)
        self.solutions = SolutionSet(self.max_solutions, normalize=self.normalize)
        self._started = self.clock()

    @classmethod
    def start(
        cls,
        min_crossings: int,
        max_solutions: int,
        observer: Optional[SearchObserver] = None,
        limits: Optional[SearchLimits] = None,
        normalize: bool = True,
    ) -> "SearchRun":
        return cls(
            min_crossings=min_crossings,
            max_solutions=max_solutions,
            observer=observer if observer is not None else NullObserver(),
            limits=limits if limits is not None else SearchLimits(),
            normalize=normalize,
        )

    @property
    def done(self) -> bool:
        return self.solutions.full

    def tick(self) -> None:
        """Close one iteration and enforce the budget."""

        self.observer.next_iteration(self.iterations)
        self.iterations += 1
        max_iterations = self.limits.max_iterations
        if max_iterations is not None and self.iterations >= max_iterations:
            raise SearchLimitReached(StopReason.ITERATION_LIMIT.value)
        time_limit = self.limits.time_limit_seconds
        if time_limit is not None and self.clock() - self._started >= time_limit:
            raise SearchLimitReached(StopReason.TIME_LIMIT.value)

    def offer(self, layout: Layout) -> Optional[Layout]:
        """Accept a valid, complete layout if it meets the crossing threshold.

        Returns the stored form, or ``None`` when the layout is below the
        threshold or already known.
        """

        crossings = layout.crossing_count()
        if crossings < self.min_crossings:
            return None
        stored = self.solutions.add(layout)
        if stored is not None:
            self.observer.found_solution(stored, crossings, self.iterations)
        return stored

    def outcome(self, stop_reason: StopReason) -> SearchOutcome:
        return SearchOutcome(
            solutions=self.solutions.layouts,
            iterations=self.iterations,
            stop_reason=stop_reason,
        )

    def interrupted(self, exc: SearchLimitReached) -> SearchOutcome:
        return self.outcome(StopReason(exc.reason))


def validate_search_arguments(min_crossings: int, max_solutions: int) -> None:
    if min_crossings < 0:
        raise ValueError(f"min_crossings must not be negative: {min_crossings}")
    if max_solutions < 1:
        raise ValueError(f"max_solutions must be at least 1: {max_solutions}")
