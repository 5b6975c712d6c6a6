"""Recursive depth-first placement anchored at letters already on the grid.

Each step crosses one remaining word over a cell that exactly one placed word
covers, so the set of placed words strictly grows and the recursion ends at
the all-placed state or when no remaining word finds a valid anchor. The
shared solution set stops the traversal once the quota is reached, which keeps
the search practical for word lists far beyond brute force.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Set, Tuple

from ..core.constants import ORIENTATIONS
from ..core.exceptions import SearchLimitReached, WordListError
from ..core.models import Layout, WordPlacement
from ..utils.logger import get_logger
from .anchoring import anchor_candidates
from .search import SearchLimits, SearchObserver, SearchOutcome, SearchRun, StopReason
from .validator import is_valid


LOGGER = get_logger(__name__)

# Upper bound on remembered partial layouts; beyond it shapes are re-explored.
DEFAULT_MAX_EXPLORED = 250_000

ShapeKey = Tuple[Tuple[int, int, int, str], ...]


def _without(words: Tuple[str, ...], text: str) -> Tuple[str, ...]:
    index = words.index(text)
    return words[:index] + words[index + 1:]


def shape_key(layout: Layout) -> ShapeKey:
    """Translation- and order-insensitive key built without copying placements."""

    box = layout.bounds
    return tuple(
        sorted(
            (p.orientation.rank, p.y - box.min_y, p.x - box.min_x, p.text)
            for p in layout
        )
    )


class BacktrackingPlacer:
    """Depth-first search sharing one :class:`SearchRun` across the recursion.

    Valid partial layouts are remembered by shape; reaching the same shape
    again through another word order would explore an identical subtree, so it
    is skipped. At most ``max_explored`` shapes are kept (``None`` keeps all).
    """

    def __init__(self, run: SearchRun, max_explored: Optional[int] = DEFAULT_MAX_EXPLORED) -> None:
        if max_explored is not None and max_explored < 0:
            raise ValueError("max_explored must not be negative")
        self.run = run
        self.max_explored = max_explored
        self._explored: Set[ShapeKey] = set()

    @property
    def explored(self) -> int:
        return len(self._explored)

    def _remember(self, key: ShapeKey) -> None:
        if self.max_explored is None or len(self._explored) < self.max_explored:
            self._explored.add(key)

    def place(self, layout: Layout, remaining: Sequence[str]) -> List[Layout]:
        """Complete ``layout`` with ``remaining``; return the newly accepted layouts."""

        remaining = tuple(remaining)
        if not remaining:
            stored = self.run.offer(layout)
            return [stored] if stored is not None else []

        found: List[Layout] = []
        for text in dict.fromkeys(remaining):
            rest = _without(remaining, text)
            for crossed in layout:
                for placement in anchor_candidates(layout, text, crossed):
                    candidate = layout.extended(placement)
                    key = shape_key(candidate)
                    if key in self._explored:
                        continue
                    valid = is_valid(candidate)
                    self.run.tick()
                    if not valid:
                        continue
                    self._remember(key)
                    found.extend(self.place(candidate, rest))
                    if self.run.done:
                        return found
        return found


def find_layouts_by_backtracking(
    words: Sequence[str],
    min_crossings: int = 0,
    max_solutions: int = 1,
    *,
    observer: Optional[SearchObserver] = None,
    limits: Optional[SearchLimits] = None,
    max_explored: Optional[int] = DEFAULT_MAX_EXPLORED,
) -> SearchOutcome:
    """Seed with every distinct word at the origin, horizontally then vertically."""

    if not words:
        raise WordListError("Cannot search layouts for an empty word list")
    run = SearchRun.start(min_crossings, max_solutions, observer, limits)
    placer = BacktrackingPlacer(run, max_explored=max_explored)
    all_words = tuple(words)
    LOGGER.info("Backtracking over %d words (min crossings %d)", len(all_words), min_crossings)

    try:
        for text in dict.fromkeys(all_words):
            rest = _without(all_words, text)
            for orientation in ORIENTATIONS:
                seed = Layout.of(WordPlacement.build(text, 0, 0, orientation))
                placer.place(seed, rest)
                if run.done:
                    LOGGER.info(
                        "Solution quota reached after %d validity checks", run.iterations
                    )
                    return run.outcome(StopReason.QUOTA)
    except SearchLimitReached as exc:
        LOGGER.warning("%s after %d validity checks", exc, run.iterations)
        return run.interrupted(exc)

    LOGGER.info(
        "Backtracking exhausted: %d solutions, %d partial layouts explored",
        len(run.solutions),
        placer.explored,
    )
    return run.outcome(StopReason.EXHAUSTED)
