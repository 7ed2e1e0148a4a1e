"""Melting temperature and specificity of every canonical register of a helix."""

from __future__ import annotations

import copy

from grace.energy_params import ScoringParameters, aa_index
from grace.helix import OFFSETS, STRANDS, TripleHelix
from grace.pairwise import START, pairwise_calc

CANONICAL = 0
LENGTH_CAP = 50

_UNSET_BEST = (6, 6, 6, 11)
_UNSET_SECOND = (5, 5, 5, 10)
_UNSET_CC = (7, 7, 7, 12)

_TERMINAL_BONUS = {"Y": 3.0, "W": 2.8}


def _grid() -> list[list[list[list[float]]]]:
    return [
        [[[0.0] * OFFSETS for _ in range(STRANDS)] for _ in range(STRANDS)]
        for _ in range(STRANDS)
    ]


def _length_basis(parameters: ScoringParameters, num_aa: int) -> float:
    if num_aa > LENGTH_CAP:
        return parameters.a + parameters.b * LENGTH_CAP + parameters.c * LENGTH_CAP * LENGTH_CAP
    return parameters.a + parameters.b * num_aa + parameters.c * num_aa * num_aa


def _slot_of(helix: TripleHelix, position: int) -> int:
    """0 for Xaa, 1 for Yaa, 2 for Gly."""
    if helix.is_xaa(position):
        return 0
    if helix.is_yaa(position):
        return 1
    return 2


def _termini(helix: TripleHelix) -> tuple[int, int]:
    nterm = (0 if helix.nterm == "ac" else 3) + _slot_of(helix, 0)
    # C-terminal types are ordered Gly, Xaa, Yaa.
    cterm = (0 if helix.cterm == "am" else 3) + (_slot_of(helix, helix.num_aa - 1) + 1) % 3
    return nterm, cterm


def _add_propensities(
    total: float,
    parameters: ScoringParameters,
    helix: TripleHelix,
    codes: list[list[int]],
    peptides: tuple[int, int, int],
) -> float:
    n = helix.num_aa
    for x in range(n):
        if helix.is_xaa(x):
            table = parameters.propensity_x
        elif helix.is_yaa(x):
            table = parameters.propensity_y
        else:
            continue
        interior = 2 < x < n - 2
        for peptide in peptides:
            value = table[codes[peptide][x]]
            total += value if interior else value / 3
    return total


def _thread(
    parameters: ScoringParameters,
    helix: TripleHelix,
    lead: list[int],
    follow: list[int],
    axial_shift: int,
    lateral_shift: int,
) -> tuple[list[float], list[float]]:
    n = helix.num_aa
    axial: list[float] = []
    lateral: list[float] = []
    for x in range(n):
        if not helix.is_yaa(x):
            continue
        partner = x + axial_shift
        axial.append(parameters.axial[lead[x]][follow[partner]] if 0 <= partner < n else 0.0)
        partner = x + lateral_shift
        lateral.append(parameters.lateral[lead[x]][follow[partner]] if 0 <= partner < n else 0.0)
    return axial, lateral


def _add_thread(total: float, axial: list[float], lateral: list[float], num_yaa: int) -> float:
    total += pairwise_calc(axial, lateral, 0, num_yaa, START, 0.0, 0.0)
    # Every destabilising interaction is counted.
    for axial_term, lateral_term in zip(axial[:num_yaa], lateral[:num_yaa]):
        if axial_term < 0:
            total += axial_term
        if lateral_term < 0:
            total += lateral_term
    return total


def _is_correct_composition(num_pep: int, a: int, b: int, c: int) -> bool:
    if num_pep == 1:
        return True
    if num_pep == 2:
        return not (a == b == c)
    return a != b and a != c and b != c


def score_helix(parameters: ScoringParameters, helix: TripleHelix) -> TripleHelix:
    """Score every canonical register of ``helix`` and return a scored copy.

    Each composition of leading, middle and trailing peptide is scored with
    the canonical offset. The copy carries the best and second best
    registers, their melting temperatures, the specificity between them and
    the best register of the intended composition (``cc_tm``).
    """
    if not 1 <= helix.num_pep <= STRANDS:
        raise ValueError(f"number of peptides must be 1 to {STRANDS}, got {helix.num_pep}")
    if helix.num_aa < 1:
        raise ValueError("a helix needs at least one residue")

    scored = copy.deepcopy(helix)
    n = scored.num_aa
    strands = [scored.sequences[p][:n] for p in range(scored.num_pep)]
    for index, strand in enumerate(strands):
        if len(strand) < n:
            raise ValueError(f"strand {index} is shorter than {n} residues")
    codes = [[aa_index(residue) for residue in strand] for strand in strands]

    scored.propensity = _grid()
    scored.pairwise = _grid()
    scored.tm = _grid()

    num_yaa = n // 3
    nterm, cterm = _termini(scored)
    length_basis = _length_basis(parameters, n)

    max_tm, best = -1000.0, list(_UNSET_BEST)
    second_tm, second = -2000.0, list(_UNSET_SECOND)
    scored.cc_tm = -1500.0
    scored.cc_register = list(_UNSET_CC)

    d = CANONICAL
    peptides = range(scored.num_pep)
    for a in peptides:
        for b in peptides:
            for c in peptides:
                propensity = length_basis + parameters.frame_shift[nterm][cterm]
                for residue, bonus in _TERMINAL_BONUS.items():
                    if strands[a][0] == strands[b][0] == strands[c][0] == residue:
                        propensity += bonus
                    if strands[a][-1] == strands[b][-1] == strands[c][-1] == residue:
                        propensity += bonus
                propensity = _add_propensities(propensity, parameters, scored, codes, (a, b, c))

                pairwise = _add_thread(0.0, *_thread(parameters, scored, codes[a], codes[b], 2, -1), num_yaa)
                pairwise = _add_thread(pairwise, *_thread(parameters, scored, codes[b], codes[c], 2, -1), num_yaa)
                pairwise = _add_thread(pairwise, *_thread(parameters, scored, codes[c], codes[a], 5, 2), num_yaa)

                tm = propensity + pairwise
                scored.propensity[a][b][c][d] = propensity
                scored.pairwise[a][b][c][d] = pairwise
                scored.tm[a][b][c][d] = tm

                if tm >= max_tm:
                    second_tm, second = max_tm, best
                    max_tm, best = tm, [a, b, c, d]
                elif tm >= second_tm:
                    second_tm, second = tm, [a, b, c, d]

                if _is_correct_composition(scored.num_pep, a, b, c) and tm >= scored.cc_tm:
                    scored.cc_tm = tm
                    scored.cc_register[:3] = [a, b, c]
                    if scored.num_pep > 1:
                        scored.cc_register[3] = d

    scored.high_tm = max_tm
    scored.best_register = list(best)
    scored.best_propensity = scored.propensity[best[0]][best[1]][best[2]][best[3]]
    scored.best_pairwise = scored.pairwise[best[0]][best[1]][best[2]][best[3]]
    scored.sec_tm = second_tm
    scored.sec_register = list(second)
    scored.specificity = max_tm - second_tm

    # An experimental Tm of -10 means no transition was observed; only
    # predictions above 10 are penalised then.
    if scored.exp_tm == -10:
        scored.deviation = 0.0 if scored.cc_tm <= 10 else scored.cc_tm - 10
    else:
        scored.deviation = scored.cc_tm - scored.exp_tm
    return scored