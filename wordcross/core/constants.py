"""Shared constants and enumerations for the layout search."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Orientation(str, Enum):
    """Orientations a word can be placed in."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"

    @property
    def step(self) -> Tuple[int, int]:
        return ORIENTATION_STEPS[self]

    @property
    def perpendicular(self) -> "Orientation":
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL

    @property
    def rank(self) -> int:
        """Sort rank: horizontal placements order before vertical ones."""
        return 0 if self is Orientation.HORIZONTAL else 1


ORIENTATION_STEPS: Dict[Orientation, Tuple[int, int]] = {
    Orientation.HORIZONTAL: (1, 0),
    Orientation.VERTICAL: (0, 1),
}

# Orientation digit values used by the odometer-driven engines.
ORIENTATIONS: Tuple[Orientation, ...] = (Orientation.HORIZONTAL, Orientation.VERTICAL)

BLANK_CELL = " "
CONFLICT_MARKER = "*"
