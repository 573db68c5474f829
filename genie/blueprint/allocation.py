"""
Difficulty allocation: split N questions across easy/medium/hard percentages.

Each bucket is rounded independently. A rounding deficit is added to Easy;
a rounding surplus is left alone, so the counts can sum to more than the
requested total (e.g. 3 questions at 50/50/0 gives 2 + 2 + 0).
"""

import math
from typing import List

from ..models.blueprint import AllocationEntry, DifficultyLabel, DifficultySpec


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return int(math.floor(value + 0.5))


def allocate(total: int, spec: DifficultySpec) -> List[AllocationEntry]:
    """Return [Easy, Medium, Hard] question counts for the given split."""
    easy = round_half_up(spec.easy / 100 * total)
    medium = round_half_up(spec.medium / 100 * total)
    hard = round_half_up(spec.hard / 100 * total)

    drift = total - (easy + medium + hard)
    if drift > 0:
        easy += drift

    return [
        AllocationEntry(label=DifficultyLabel.EASY, count=easy),
        AllocationEntry(label=DifficultyLabel.MEDIUM, count=medium),
        AllocationEntry(label=DifficultyLabel.HARD, count=hard),
    ]
