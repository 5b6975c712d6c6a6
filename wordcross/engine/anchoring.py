"""Candidate anchors for crossing a new word over an already placed one."""

from __future__ import annotations

from typing import Iterator

from ..core.models import Layout, WordPlacement


def anchor_candidates(layout: Layout, text: str, crossed: WordPlacement) -> Iterator[WordPlacement]:
    """Yield placements of ``text`` perpendicular to ``crossed`` sharing one of its letters.

    Only cells of ``crossed`` that no other word covers yet are used, so an
    existing crossing is never stacked on. Every index of ``text`` whose
    character matches the cell gives one candidate; the candidates are not
    validated.
    """

    orientation = crossed.orientation.perpendicular
    dx, dy = orientation.step
    for x, y, letter in crossed.cells():
        if layout.coverage(x, y) != 1:
            continue
        for offset, char in enumerate(text):
            if char == letter:
                yield WordPlacement.build(text, x - dx * offset, y - dy * offset, orientation)
