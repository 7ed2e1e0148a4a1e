"""Choice of the two fittest helices as parents of the next generation."""

from __future__ import annotations

import copy
from collections.abc import Sequence

from grace.ga_parameters import GAParameters


def find_two_highest(scores: Sequence[float], population_size: int) -> tuple[int, int]:
    """Indices of the highest and second highest of the first ``population_size`` scores.

    Earlier indices win ties. Returns ``(-1, -1)`` when fewer than two
    helices are present.
    """
    if population_size < 2:
        return -1, -1
    highest, second = (1, 0) if scores[1] > scores[0] else (0, 1)
    for index in range(2, population_size):
        if scores[index] > scores[highest]:
            second, highest = highest, index
        elif scores[index] > scores[second]:
            second = index
    return highest, second


def selection(
    parents: GAParameters, scores: Sequence[float]
) -> tuple[GAParameters, tuple[int, int]]:
    """Return a population of the two fittest helices and their indices."""
    best, second = find_two_highest(scores, parents.population_size)
    if best < 0:
        raise ValueError("selection needs at least two helices")
    chosen = copy.deepcopy(parents)
    chosen.population_size = 2
    chosen.helices = [
        [strand[: parents.num_aa] for strand in parents.helices[index][: parents.num_pep]]
        for index in (best, second)
    ]
    return chosen, (best, second)