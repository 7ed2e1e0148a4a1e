"""Best combination of stabilising pairwise interactions along one thread."""

from __future__ import annotations

from collections.abc import Sequence

NO_PAIR = 0
LATERAL = 1
AXIAL = 2
START = 9


def _value(values: Sequence[float], index: int) -> float:
    return values[index] if 0 <= index < len(values) else 0.0


def pairwise_calc(
    axial: Sequence[float],
    lateral: Sequence[float],
    current_pair: int,
    last_pair: int,
    previous_type: int,
    current_sum: float,
    best_total: float,
) -> float:
    """Return the largest sum of stabilising interactions from ``current_pair`` on.

    Only positive axial and lateral terms are summed; destabilising terms are
    accounted for by the caller. Positions past the end of a sequence count
    as zero. ``previous_type`` is the interaction chosen at the previous pair
    (``NO_PAIR``, ``LATERAL`` or ``AXIAL``; ``START`` at the first call).
    """
    if current_pair > last_pair:
        return best_total

    if previous_type != NO_PAIR:
        if current_pair == last_pair:
            return current_sum if current_sum > best_total else best_total
        best_total = pairwise_calc(
            axial, lateral, current_pair + 1, last_pair, NO_PAIR, current_sum, best_total
        )

    if previous_type != AXIAL:
        term = _value(lateral, current_pair)
        if term > 0:
            current_sum += term
        if current_pair == last_pair:
            return current_sum if current_sum > best_total else best_total
        best_total = pairwise_calc(
            axial, lateral, current_pair + 1, last_pair, LATERAL, current_sum, best_total
        )

    term = _value(axial, current_pair)
    if term > 0:
        current_sum += term
    if current_pair == last_pair:
        return current_sum if current_sum > best_total else best_total
    return pairwise_calc(
        axial, lateral, current_pair + 1, last_pair, AXIAL, current_sum, best_total
    )