"""Crossword layout search: arrange a fixed word list on a grid.

This package exposes the public API surface via:

- ``wordcross.engine.generator.LayoutGenerator``: validates input and runs a search.
- ``wordcross.core.models``: ``Word``, ``WordPlacement`` and ``Layout`` values.
- ``wordcross.engine.validator.is_valid``: the placement legality check.
- ``wordcross.engine`` search functions: brute force, permutation and backtracking.
"""

from .core.constants import Orientation
from .core.models import Layout, Word, WordPlacement
from .engine.backtracking import find_layouts_by_backtracking
from .engine.brute_force import find_layouts_by_brute_force
from .engine.generator import GenerationResult, GeneratorConfig, LayoutGenerator, SearchMethod
from .engine.permutation import find_layouts_by_permutation
from .engine.validator import LayoutValidator, is_valid

__all__ = [
    "Orientation",
    "Layout",
    "Word",
    "WordPlacement",
    "LayoutValidator",
    "is_valid",
    "find_layouts_by_brute_force",
    "find_layouts_by_permutation",
    "find_layouts_by_backtracking",
    "GenerationResult",
    "GeneratorConfig",
    "LayoutGenerator",
    "SearchMethod",
]

__version__ = "0.1.0"
