"""Scoring of a population and the fitness derived from it."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from grace.energy_params import ScoringParameters
from grace.ga_parameters import GAParameters
from grace.helix import STRANDS, TripleHelix
from grace.scoring import score_helix

HOMOTRIMER_SPECIFICITY = -10.0
CORRECT_REGISTER = (0, 1, 2)
CORRECT_REGISTER_SCORE = 50
WRONG_REGISTER_SCORE = -50

# (specificity, melting temperature, register) weights
_WEIGHTS = (0.5, 0.5, 0.0)
_MOTIF_WEIGHTS = (0.4, 0.4, 0.2)


@dataclass
class PopulationScores:
    """Per-helix predictions for one population, in population order."""

    tm: list[float]
    specificity: list[float]
    best_registers: list[tuple[int, int, int]]
    helices: list[TripleHelix]
    fitness: list[float] = field(default_factory=list)


def _to_helix(params: GAParameters, strands: list[str]) -> TripleHelix:
    sequences = [strand.upper() for strand in strands[: params.num_pep]]
    sequences += [""] * (STRANDS - len(sequences))
    helix = TripleHelix(
        num_pep=params.num_pep,
        num_aa=params.num_aa,
        sequences=sequences,
        nterm="ac",
        cterm="am",
    )
    helix.determine_repetition()
    return helix


def score_population(
    params: GAParameters, scoring_parameters: ScoringParameters
) -> PopulationScores:
    """Predict Tm, specificity and best register for each helix.

    A helix whose best register is a homotrimer gets a specificity of -10.
    """
    if len(params.helices) < params.population_size:
        raise ValueError(
            f"population size is {params.population_size} but only "
            f"{len(params.helices)} helices are present"
        )
    tms: list[float] = []
    specificities: list[float] = []
    registers: list[tuple[int, int, int]] = []
    scored_helices: list[TripleHelix] = []
    for strands in params.helices[: params.population_size]:
        scored = score_helix(scoring_parameters, _to_helix(params, strands))
        register = tuple(scored.best_register[:3])
        specificity = scored.specificity
        if register[0] == register[1] == register[2]:
            specificity = HOMOTRIMER_SPECIFICITY
        tms.append(scored.cc_tm)
        specificities.append(specificity)
        registers.append(register)
        scored_helices.append(scored)
    return PopulationScores(tms, specificities, registers, scored_helices)


def fitness_scores(
    params: GAParameters, scoring_parameters: ScoringParameters
) -> PopulationScores:
    """Score the population and attach a fitness value to every helix.

    Fitness weighs specificity and Tm equally; with a motif it also rewards
    helices whose best register is the intended ``{012}``.
    """
    scores = score_population(params, scoring_parameters)
    spec_weight, tm_weight, register_weight = _MOTIF_WEIGHTS if params.have_motif else _WEIGHTS
    fitness = [
        spec_weight * specificity
        + tm_weight * tm
        + register_weight
        * (CORRECT_REGISTER_SCORE if register == CORRECT_REGISTER else WRONG_REGISTER_SCORE)
        for specificity, tm, register in zip(scores.specificity, scores.tm, scores.best_registers)
    ]
    return dataclasses.replace(scores, fitness=fitness)