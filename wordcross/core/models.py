"""Data models supporting the layout search."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple

from .constants import BLANK_CELL, CONFLICT_MARKER, Orientation


@dataclass(frozen=True)
class Word:
    """A word together with the orientation it is meant to be placed in."""

    text: str
    orientation: Orientation

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("Word text must not be empty")

    def __len__(self) -> int:
        return len(self.text)

    def __getitem__(self, index: int) -> str:
        return self.text[index]


@dataclass(frozen=True)
class WordPlacement:
    """A word fixed on the grid; ``(x, y)`` is the cell of its first character."""

    word: Word
    x: int
    y: int

    @classmethod
    def build(cls, text: str, x: int, y: int, orientation: Orientation) -> "WordPlacement":
        return cls(Word(text, orientation), x, y)

    @property
    def text(self) -> str:
        return self.word.text

    @property
    def orientation(self) -> Orientation:
        return self.word.orientation

    @property
    def end_x(self) -> int:
        """Exclusive end column."""
        if self.orientation is Orientation.HORIZONTAL:
            return self.x + len(self.word)
        return self.x + 1

    @property
    def end_y(self) -> int:
        """Exclusive end row."""
        if self.orientation is Orientation.HORIZONTAL:
            return self.y + 1
        return self.y + len(self.word)

    def character_at(self, x: int, y: int) -> Optional[str]:
        if self.orientation is Orientation.HORIZONTAL:
            if y == self.y and self.x <= x < self.end_x:
                return self.text[x - self.x]
        elif x == self.x and self.y <= y < self.end_y:
            return self.text[y - self.y]
        return None

    def cells(self) -> Iterator[Tuple[int, int, str]]:
        dx, dy = self.orientation.step
        for offset, char in enumerate(self.text):
            yield self.x + dx * offset, self.y + dy * offset, char

    def translated(self, dx: int, dy: int) -> "WordPlacement":
        return WordPlacement(self.word, self.x + dx, self.y + dy)

    def sort_key(self) -> Tuple[int, int, int, str]:
        return (self.orientation.rank, self.y, self.x, self.text)

    def __lt__(self, other: "WordPlacement") -> bool:
        if not isinstance(other, WordPlacement):
            return NotImplemented
        return self.sort_key() < other.sort_key()


class Occupant(NamedTuple):
    """A letter found at a cell, with the index of the placement owning it."""

    letter: str
    index: int


@dataclass(frozen=True)
class BoundingBox:
    """Cell rectangle covered by a layout; maxima are exclusive."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y


EMPTY_BOUNDS = BoundingBox(0, 0, 0, 0)

CanonicalKey = Tuple[WordPlacement, ...]


@dataclass(frozen=True)
class Layout:
    """An ordered, immutable set of placements forming a candidate puzzle.

    Overlap legality is not enforced here; see
    :class:`wordcross.engine.validator.LayoutValidator`. Search engines grow
    layouts with :meth:`extended`, which copies instead of mutating, so sibling
    branches never share state.
    """

    placements: Tuple[WordPlacement, ...] = ()

    @classmethod
    def of(cls, *placements: WordPlacement) -> "Layout":
        return cls(tuple(placements))

    def __len__(self) -> int:
        return len(self.placements)

    def __iter__(self) -> Iterator[WordPlacement]:
        return iter(self.placements)

    def __getitem__(self, index: int) -> WordPlacement:
        return self.placements[index]

    def extended(self, placement: WordPlacement) -> "Layout":
        return Layout(self.placements + (placement,))

    # ------------------------------------------------------------------
    # Character access
    # ------------------------------------------------------------------
    @cached_property
    def cell_index(self) -> Dict[Tuple[int, int], Tuple[Occupant, ...]]:
        """Occupants of every covered cell, in placement order. Read-only."""

        cells: Dict[Tuple[int, int], List[Occupant]] = {}
        for index, placement in enumerate(self.placements):
            for x, y, char in placement.cells():
                cells.setdefault((x, y), []).append(Occupant(char, index))
        return {cell: tuple(occupants) for cell, occupants in cells.items()}

    def characters_at(self, x: int, y: int) -> List[Occupant]:
        return list(self.cell_index.get((x, y), ()))

    def coverage(self, x: int, y: int) -> int:
        return len(self.cell_index.get((x, y), ()))

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @cached_property
    def bounds(self) -> BoundingBox:
        if not self.placements:
            return EMPTY_BOUNDS
        return BoundingBox(
            min_x=min(p.x for p in self.placements),
            min_y=min(p.y for p in self.placements),
            max_x=max(p.end_x for p in self.placements),
            max_y=max(p.end_y for p in self.placements),
        )

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def crossing_count(self) -> int:
        """Number of cells covered by two or more placements."""
        return sum(1 for occupants in self.cell_index.values() if len(occupants) > 1)

    def render(self) -> str:
        box = self.bounds
        rows: List[str] = []
        for y in range(box.min_y, box.max_y):
            row: List[str] = []
            for x in range(box.min_x, box.max_x):
                char = BLANK_CELL
                for occupant in self.cell_index.get((x, y), ()):
                    if char == BLANK_CELL:
                        char = occupant.letter
                    elif char != occupant.letter:
                        char = CONFLICT_MARKER
                row.append(char)
            rows.append("".join(row))
        return "\n".join(rows)

    # ------------------------------------------------------------------
    # Canonical forms
    # ------------------------------------------------------------------
    def translated(self, dx: int, dy: int) -> "Layout":
        return Layout(tuple(p.translated(dx, dy) for p in self.placements))

    def normalized(self) -> "Layout":
        """Translate so the bounding box starts at ``(0, 0)``."""
        box = self.bounds
        if box.min_x == 0 and box.min_y == 0:
            return self
        return self.translated(-box.min_x, -box.min_y)

    def canonical_key(self) -> CanonicalKey:
        """Order-insensitive identity of the placements."""
        return tuple(sorted(self.placements, key=WordPlacement.sort_key))

    def texts(self) -> List[str]:
        return [p.text for p in self.placements]
