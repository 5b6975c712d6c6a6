"""Demo word lists."""

from __future__ import annotations

from typing import Dict, Tuple

SAMPLE_WORD_LISTS: Dict[str, Tuple[str, ...]] = {
    "hiking": ("MAIWANDERUNG", "NEUN", "SONNE", "RADWEG", "BAZAR"),
    "ski": (
        "DEHNEN",
        "NIKOLAUS",
        "NEUREUTHER",
        "SOELDEN",
        "RUNDLAUF",
        "DREI",
        "HOCKE",
        "BUEGELEISEN",
        "FIS",
    ),
}

# Default crossing thresholds for the demo runs.
SAMPLE_MIN_CROSSINGS: Dict[str, int] = {
    "hiking": 4,
    "ski": 10,
}
