"""Pretty-print helpers for layouts and search results."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..core.models import Layout

if TYPE_CHECKING:
    from ..engine.generator import GenerationResult


RULE = "==============="


def format_layout(layout: Layout, label: Optional[str] = None) -> str:
    """Render ``layout`` between two rules, optionally under a label."""

    lines = [label] if label else []
    lines.extend([RULE, layout.render(), RULE])
    return "\n".join(lines)


def pretty_print_layout(layout: Layout, *, label: str | None = None, stream=None) -> None:
    """Print the layout in a human-friendly format."""

    stream = stream or sys.stdout
    print(format_layout(layout, label), file=stream)


def layout_to_jsonable(layout: Layout) -> Dict[str, Any]:
    return {
        "width": layout.width,
        "height": layout.height,
        "crossings": layout.crossing_count(),
        "placements": [
            {
                "text": placement.text,
                "orientation": placement.orientation.value,
                "x": placement.x,
                "y": placement.y,
            }
            for placement in layout
        ],
        "rows": layout.render().split("\n"),
    }


def print_generation_stats(result: GenerationResult, *, stream=None) -> None:
    """Print every solution followed by a summary of the search."""

    stream = stream or sys.stdout
    for number, layout in enumerate(result.solutions, start=1):
        label = f"Solution {number} ({layout.crossing_count()} crossings, {layout.width}x{layout.height}):"
        pretty_print_layout(layout, label=label, stream=stream)

    print(file=stream)
    print("--- Search ---", file=stream)
    print(f"  Method:        {result.method.value}", file=stream)
    print(f"  Words:         {len(result.words)}", file=stream)
    print(f"  Solutions:     {len(result.solutions)}", file=stream)
    print(f"  Iterations:    {result.iterations}", file=stream)
    print(f"  Stopped by:    {result.stop_reason.value}", file=stream)
    print(f"  Elapsed:       {result.elapsed_seconds:.2f}s", file=stream)

    if result.solutions:
        crossings = Counter(layout.crossing_count() for layout in result.solutions)
        dist_parts = [f"{count}:{n}" for count, n in sorted(crossings.items())]
        print(f"  Crossings:     {' '.join(dist_parts)}", file=stream)
