"""Mixed-radix counting and permutation helpers for exhaustive enumeration."""

from __future__ import annotations

from collections import Counter
from math import factorial, prod
from typing import Iterator, List, MutableSequence, Sequence, Tuple, TypeVar

T = TypeVar("T")


def increment(digits: MutableSequence[int], radices: Sequence[int]) -> bool:
    """Advance ``digits`` by one in place, carrying from left to right.

    ``digits[i]`` counts modulo ``radices[i]``; the first digit turns fastest.
    Returns ``False`` when the last digit overflows, in which case every digit
    has wrapped back to zero and the enumeration is complete.
    """

    if len(digits) != len(radices):
        raise ValueError("digits and radices must have the same length")
    for position, radix in enumerate(radices):
        if digits[position] + 1 < radix:
            digits[position] += 1
            return True
        digits[position] = 0
    return False


def odometer(radices: Sequence[int]) -> Iterator[Tuple[int, ...]]:
    """Yield every digit vector for ``radices``, starting at all zeros."""

    if any(radix < 1 for radix in radices):
        raise ValueError(f"Radices must be positive: {list(radices)}")
    digits: List[int] = [0] * len(radices)
    while True:
        yield tuple(digits)
        if not increment(digits, radices):
            return


def combination_count(radices: Sequence[int]) -> int:
    return prod(radices)


def distinct_permutations(items: Sequence[T]) -> Iterator[Tuple[T, ...]]:
    """Yield the distinct orderings of ``items`` in lexicographic order.

    Repeated items produce each ordering once, unlike
    :func:`itertools.permutations`.
    """

    current = sorted(items)
    while True:
        yield tuple(current)
        # Rightmost ascent.
        pivot = len(current) - 2
        while pivot >= 0 and not current[pivot] < current[pivot + 1]:
            pivot -= 1
        if pivot < 0:
            return
        successor = len(current) - 1
        while not current[pivot] < current[successor]:
            successor -= 1
        current[pivot], current[successor] = current[successor], current[pivot]
        current[pivot + 1:] = reversed(current[pivot + 1:])


def permutation_count(items: Sequence[T]) -> int:
    """Number of distinct orderings :func:`distinct_permutations` yields."""

    total = factorial(len(items))
    for repeat in Counter(items).values():
        total //= factorial(repeat)
    return total
