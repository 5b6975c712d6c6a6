"""Exhaustive enumeration of every position and orientation combination.

Combinatorially expensive: ``(L + 1) ** (2 * n) * 2 ** n`` candidates for ``n``
words whose longest has length ``L``. Only practical for tiny inputs, where it
serves as the reference the other engines are checked against.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.constants import ORIENTATIONS
from ..core.exceptions import SearchLimitReached, WordListError
from ..core.models import Layout, WordPlacement
from ..utils.logger import get_logger
from .odometer import combination_count, odometer
from .search import SearchLimits, SearchObserver, SearchOutcome, SearchRun, StopReason
from .validator import is_valid


LOGGER = get_logger(__name__)


def brute_force_radices(words: Sequence[str]) -> List[int]:
    """Odometer radices: one orientation digit per word, then x digits, then y digits."""

    if not words:
        raise WordListError("Cannot enumerate layouts for an empty word list")
    coordinate_radix = max(len(word) for word in words) + 1
    count = len(words)
    return [len(ORIENTATIONS)] * count + [coordinate_radix] * (2 * count)


def brute_force_space(words: Sequence[str]) -> int:
    return combination_count(brute_force_radices(words))


def layout_from_digits(words: Sequence[str], digits: Sequence[int]) -> Layout:
    count = len(words)
    return Layout(
        tuple(
            WordPlacement.build(
                word,
                digits[count + index],
                digits[2 * count + index],
                ORIENTATIONS[digits[index]],
            )
            for index, word in enumerate(words)
        )
    )


def find_layouts_by_brute_force(
    words: Sequence[str],
    min_crossings: int = 0,
    max_solutions: int = 1,
    *,
    observer: Optional[SearchObserver] = None,
    limits: Optional[SearchLimits] = None,
) -> SearchOutcome:
    """Try every combination and keep the valid ones meeting ``min_crossings``.

    Solutions keep their absolute coordinates; only exact duplicates (possible
    with repeated words) are collapsed.
    """

    run = SearchRun.start(min_crossings, max_solutions, observer, limits, normalize=False)
    radices = brute_force_radices(words)
    LOGGER.info(
        "Brute force over %d words: %d combinations", len(words), combination_count(radices)
    )

    try:
        for digits in odometer(radices):
            layout = layout_from_digits(words, digits)
            if is_valid(layout) and run.offer(layout) is not None and run.done:
                LOGGER.info("Solution quota reached after %d iterations", run.iterations)
                return run.outcome(StopReason.QUOTA)
            run.tick()
    except SearchLimitReached as exc:
        LOGGER.warning("%s after %d iterations", exc, run.iterations)
        return run.interrupted(exc)

    LOGGER.info("Brute force exhausted: %d solutions", len(run.solutions))
    return run.outcome(StopReason.EXHAUSTED)

