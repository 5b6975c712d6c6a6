"""Permutation-driven incremental placement.

Every distinct ordering of the words is combined with every orientation
assignment. For one combination the first word is laid at the origin and each
following word is crossed over the words already placed, branching over every
matching anchor that keeps the layout valid.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..core.constants import ORIENTATIONS
from ..core.exceptions import SearchLimitReached, WordListError
from ..core.models import CanonicalKey, Layout, Word, WordPlacement
from ..utils.logger import get_logger
from .anchoring import anchor_candidates
from .odometer import distinct_permutations, odometer, permutation_count
from .search import SearchLimits, SearchObserver, SearchOutcome, SearchRun, StopReason
from .validator import is_valid


LOGGER = get_logger(__name__)


def permutation_space(words: Sequence[str]) -> int:
    return permutation_count(words) * len(ORIENTATIONS) ** len(words)


def extend_frontier(frontier: Sequence[Layout], word: Word) -> List[Layout]:
    """All valid layouts obtained by crossing ``word`` into one of ``frontier``."""

    extended: Dict[CanonicalKey, Layout] = {}
    for layout in frontier:
        for crossed in layout:
            if crossed.orientation is word.orientation:
                continue
            for placement in anchor_candidates(layout, word.text, crossed):
                candidate = layout.extended(placement)
                key = candidate.canonical_key()
                if key in extended:
                    continue
                if is_valid(candidate):
                    extended[key] = candidate
    return list(extended.values())


def grow_layouts(sequence: Sequence[Word]) -> List[Layout]:
    """Place ``sequence`` word by word; empty when some word cannot be anchored.

    A word without any valid anchor drops the whole combination. It is not
    deferred for a later retry.
    """

    if not sequence:
        return []
    frontier = [Layout.of(WordPlacement(sequence[0], 0, 0))]
    for word in sequence[1:]:
        frontier = extend_frontier(frontier, word)
        if not frontier:
            LOGGER.debug("No anchor for '%s' (%s)", word.text, word.orientation.value)
            return []
    return frontier


def find_layouts_by_permutation(
    words: Sequence[str],
    min_crossings: int = 0,
    max_solutions: int = 1,
    *,
    observer: Optional[SearchObserver] = None,
    limits: Optional[SearchLimits] = None,
) -> SearchOutcome:
    """Search orderings × orientation assignments; solutions are normalized."""

    if not words:
        raise WordListError("Cannot search layouts for an empty word list")
    run = SearchRun.start(min_crossings, max_solutions, observer, limits)
    LOGGER.info(
        "Permutation search over %d words: %d combinations", len(words), permutation_space(words)
    )
    orientation_radices = [len(ORIENTATIONS)] * len(words)

    try:
        for ordering in distinct_permutations(words):
            for digits in odometer(orientation_radices):
                sequence = [
                    Word(text, ORIENTATIONS[digit]) for text, digit in zip(ordering, digits)
                ]
                for layout in grow_layouts(sequence):
                    if run.offer(layout) is not None and run.done:
                        LOGGER.info("Solution quota reached after %d iterations", run.iterations)
                        return run.outcome(StopReason.QUOTA)
                run.tick()
    except SearchLimitReached as exc:
        LOGGER.warning("%s after %d iterations", exc, run.iterations)
        return run.interrupted(exc)

    LOGGER.info("Permutation search exhausted: %d solutions", len(run.solutions))
    return run.outcome(StopReason.EXHAUSTED)
