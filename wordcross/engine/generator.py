"""Layout generation orchestration.

Validates the word list at the boundary, picks a search engine and wraps its
outcome with timing information.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from ..core.models import Layout
from ..data.wordlist import prepare_words
from ..utils.logger import get_logger
from .backtracking import find_layouts_by_backtracking
from .brute_force import brute_force_space, find_layouts_by_brute_force
from .permutation import find_layouts_by_permutation, permutation_space
from .progress import DEFAULT_PROGRESS_INTERVAL, LoggingProgressObserver
from .search import (
    SearchLimits,
    SearchObserver,
    SearchOutcome,
    StopReason,
    validate_search_arguments,
)


LOGGER = get_logger(__name__)

# Above this many combinations the brute-force enumerator will not finish in practice.
BRUTE_FORCE_WARNING_THRESHOLD = 10_000_000


class SearchMethod(str, Enum):
    """Available search engines."""

    BRUTE_FORCE = "brute_force"
    PERMUTATION = "permutation"
    BACKTRACKING = "backtracking"


Engine = Callable[..., SearchOutcome]

ENGINES: Dict[SearchMethod, Engine] = {
    SearchMethod.BRUTE_FORCE: find_layouts_by_brute_force,
    SearchMethod.PERMUTATION: find_layouts_by_permutation,
    SearchMethod.BACKTRACKING: find_layouts_by_backtracking,
}


@dataclass
class GeneratorConfig:
    words: Sequence[str]
    method: SearchMethod = SearchMethod.BACKTRACKING
    min_crossings: int = 0
    max_solutions: int = 1
    normalize_words: bool = False
    max_iterations: Optional[int] = None
    time_limit_seconds: Optional[float] = None
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL

    def to_search_limits(self) -> SearchLimits:
        return SearchLimits(
            max_iterations=self.max_iterations,
            time_limit_seconds=self.time_limit_seconds,
        )


@dataclass
class GenerationResult:
    words: List[str]
    method: SearchMethod
    solutions: List[Layout]
    iterations: int
    stop_reason: StopReason
    elapsed_seconds: float = 0.0
    messages: List[str] = field(default_factory=list)

    @property
    def exhausted(self) -> bool:
        return self.stop_reason == StopReason.EXHAUSTED

    @property
    def found(self) -> bool:
        return bool(self.solutions)


class LayoutGenerator:
    """High-level entry point: boundary checks, engine dispatch and summary."""

    def __init__(self, config: GeneratorConfig, observer: Optional[SearchObserver] = None) -> None:
        self.config = config
        self.method = SearchMethod(config.method)
        self.words = prepare_words(config.words, normalize=config.normalize_words)
        validate_search_arguments(config.min_crossings, config.max_solutions)
        self.limits = config.to_search_limits()
        self.observer = observer or LoggingProgressObserver(
            interval=config.progress_interval,
            total=self.search_space(),
        )

    def search_space(self) -> Optional[int]:
        """Number of iterations the chosen engine would need to exhaust, if known."""

        if self.method is SearchMethod.BRUTE_FORCE:
            return brute_force_space(self.words)
        if self.method is SearchMethod.PERMUTATION:
            return permutation_space(self.words)
        return None

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self) -> GenerationResult:
        messages: List[str] = []
        space = self.search_space()
        if (
            self.method is SearchMethod.BRUTE_FORCE
            and space is not None
            and space > BRUTE_FORCE_WARNING_THRESHOLD
            and self.limits.max_iterations is None
            and self.limits.time_limit_seconds is None
        ):
            message = (
                f"Brute force over {len(self.words)} words needs {space} iterations; "
                "consider a budget or another method"
            )
            LOGGER.warning(message)
            messages.append(message)

        LOGGER.info(
            "Generating layouts with %s: %d words, min crossings %d, max solutions %d",
            self.method.value,
            len(self.words),
            self.config.min_crossings,
            self.config.max_solutions,
        )
        started = time.perf_counter()
        outcome = ENGINES[self.method](
            self.words,
            self.config.min_crossings,
            self.config.max_solutions,
            observer=self.observer,
            limits=self.limits,
        )
        elapsed = time.perf_counter() - started

        if not outcome.solutions:
            message = f"No layout reaches {self.config.min_crossings} crossings"
            if not outcome.exhausted:
                message += f" before the {outcome.stop_reason.value.replace('_', ' ')}"
            LOGGER.warning(message)
            messages.append(message)

        LOGGER.info(
            "Generation finished with %d solutions in %.2fs (%d iterations, %s)",
            len(outcome.solutions),
            elapsed,
            outcome.iterations,
            outcome.stop_reason.value,
        )
        return GenerationResult(
            words=list(self.words),
            method=self.method,
            solutions=outcome.solutions,
            iterations=outcome.iterations,
            stop_reason=outcome.stop_reason,
            elapsed_seconds=elapsed,
            messages=messages,
        )
