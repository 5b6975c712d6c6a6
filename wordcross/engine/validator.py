"""Deterministic legality checks for candidate layouts.

A layout is legal when two line scans succeed: one over every row
(left to right) and one over every column (top to bottom). Both scans run the
same state machine with the axes swapped. Along a line the machine tracks an
``owner`` (the placement currently running along the line), a ``partner``
(a perpendicular placement crossing the owner at the previous cell) and
whether ownership has been ``resolved`` after a run that began on a crossing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import Orientation
from ..core.exceptions import ValidationError
from ..core.models import Layout, Occupant
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Line = Tuple[Optional[Tuple[int, int]], ...]


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str] = field(default_factory=list)


class LayoutValidator:
    """Runs the row and column scans over a layout."""

    def __init__(self, vertical_first: bool = False) -> None:
        self.vertical_first = vertical_first

    def validate(self, layout: Layout) -> ValidationResult:
        try:
            for axis in self._scan_order():
                self._scan(layout, axis)
        except ValidationError as exc:
            LOGGER.debug("Layout rejected: %s", exc)
            return ValidationResult(ok=False, messages=[str(exc)])
        return ValidationResult(ok=True)

    def is_valid(self, layout: Layout) -> bool:
        return self.validate(layout).ok

    def _scan_order(self) -> Sequence[Orientation]:
        if self.vertical_first:
            return (Orientation.VERTICAL, Orientation.HORIZONTAL)
        return (Orientation.HORIZONTAL, Orientation.VERTICAL)

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------
    def _scan(self, layout: Layout, axis: Orientation) -> None:
        cells = layout.cell_index
        for line in _lines(layout, axis):
            self._scan_line(cells, line, axis)

    @staticmethod
    def _scan_line(
        cells: Dict[Tuple[int, int], Tuple[Occupant, ...]],
        line: Line,
        axis: Orientation,
    ) -> None:
        owner: Optional[int] = None
        partner: Optional[int] = None
        resolved = False

        for cell in line:
            occupants = cells.get(cell, ()) if cell is not None else ()
            count = len(occupants)
            if count > 2:
                raise ValidationError(f"{count} words share cell {cell}")

            if owner is not None and partner is not None:
                # Previous cell was a crossing.
                if count == 2:
                    raise ValidationError(
                        f"Consecutive crossings along {axis.value.lower()} line at {cell}"
                    )
                if count == 1:
                    current = occupants[0].index
                    if resolved:
                        if current != owner:
                            raise ValidationError(f"Word collision after crossing at {cell}")
                    else:
                        if current == partner:
                            owner = partner
                        elif current != owner:
                            raise ValidationError(f"Word collision after crossing at {cell}")
                        resolved = True
                else:
                    owner = None
                partner = None
            elif owner is not None:
                if count == 2:
                    first, second = occupants
                    if first.letter != second.letter:
                        raise ValidationError(
                            f"Letter mismatch at {cell}: '{first.letter}' vs '{second.letter}'"
                        )
                    if first.index == owner:
                        partner = second.index
                    elif second.index == owner:
                        partner = first.index
                    else:
                        raise ValidationError(f"Crossing without the running word at {cell}")
                elif count == 1:
                    if occupants[0].index != owner:
                        raise ValidationError(f"Adjacent words touch at {cell}")
                else:
                    owner = None
            else:
                if count == 2:
                    first, second = occupants
                    if first.letter != second.letter:
                        raise ValidationError(
                            f"Letter mismatch at {cell}: '{first.letter}' vs '{second.letter}'"
                        )
                    owner, partner = first.index, second.index
                    resolved = False
                elif count == 1:
                    owner = occupants[0].index
                    resolved = True


def _lines(layout: Layout, axis: Orientation) -> Iterator[Line]:
    """Yield the occupied cells of every row (horizontal axis) or column (vertical axis).

    Lines run top to bottom or left to right. A run of empty cells between two
    letters is reported once as ``None``; empty cells only ever end the current
    run, so repeating them would not change the outcome. Lines without any
    letter are skipped.
    """

    positions: Dict[int, List[int]] = {}
    for x, y in layout.cell_index:
        if axis is Orientation.HORIZONTAL:
            positions.setdefault(y, []).append(x)
        else:
            positions.setdefault(x, []).append(y)

    for line_index in sorted(positions):
        cells: List[Optional[Tuple[int, int]]] = []
        previous: Optional[int] = None
        for position in sorted(positions[line_index]):
            if previous is not None and position != previous + 1:
                cells.append(None)
            if axis is Orientation.HORIZONTAL:
                cells.append((position, line_index))
            else:
                cells.append((line_index, position))
            previous = position
        yield tuple(cells)


_DEFAULT_VALIDATOR = LayoutValidator()


def is_valid(layout: Layout) -> bool:
    """Return whether ``layout`` passes both line scans."""
    return _DEFAULT_VALIDATOR.is_valid(layout)
