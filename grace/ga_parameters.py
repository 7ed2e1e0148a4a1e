"""Settings and population of the genetic search, plus Gly-repeat checks.

A helix is a list of ``num_pep`` peptide strings; ``helices`` is the
current population.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_ALPHABET = list("acdefghiklmnopqrstvwy")


@dataclass
class GAParameters:
    """Configuration and population of the genetic algorithm."""

    alphabet: list[str] = field(default_factory=lambda: list(DEFAULT_ALPHABET))
    max_helices: int = 1250
    aab: bool = False

    population_size: int = 500
    num_aa: int = 30
    num_pep: int = 3
    gly_pos: int = 0
    helices: list[list[str]] = field(default_factory=list)

    crossover_rate: float = 0.6
    mutation_rate: float = 0.2
    mutation_rate_xaa: list[float] = field(default_factory=list)
    mutation_rate_yaa: list[float] = field(default_factory=list)

    exclude_xaa: bool = False
    exclude_yaa: bool = False
    num_excluded_xaa: int = 0
    num_excluded_yaa: int = 0
    excluded_xaa_list: list[str] = field(default_factory=list)
    excluded_yaa_list: list[str] = field(default_factory=list)

    have_motif: bool = False
    motif_length: int = 0
    random_seq_length: int = 15
    motif_sequences: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.mutation_rate_xaa:
            self.mutation_rate_xaa = [self.mutation_rate] * self.alphabet_size
        if not self.mutation_rate_yaa:
            self.mutation_rate_yaa = [self.mutation_rate] * self.alphabet_size

    @property
    def alphabet_size(self) -> int:
        return len(self.alphabet)

    def set_xaa_mutation_rate_to_zero(self, amino_acid: str) -> None:
        """Stop ``amino_acid`` from being introduced at Xaa positions."""
        if amino_acid in self.alphabet:
            self.mutation_rate_xaa[self.alphabet.index(amino_acid)] = 0.0

    def set_yaa_mutation_rate_to_zero(self, amino_acid: str) -> None:
        """Stop ``amino_acid`` from being introduced at Yaa positions."""
        if amino_acid in self.alphabet:
            self.mutation_rate_yaa[self.alphabet.index(amino_acid)] = 0.0


def gly_repetition(sequence: str) -> bool:
    """True if one reading frame holds Gly at all but at most two triplets."""
    counts = [0, 0, 0]
    for position, residue in enumerate(sequence):
        if residue in "Gg":
            counts[position % 3] += 1
    threshold = len(sequence) // 3 - 2
    return any(count >= threshold for count in counts)


def find_gly_at_every_third(sequence: str) -> tuple[bool, int]:
    """Check for Gly at every third residue from one of the first three.

    Returns whether such a frame exists and the position of the last Gly
    examined among the first three residues (-1 if none). A sequence of
    exactly three residues is never accepted.
    """
    length = len(sequence)
    first_gly = -1
    for start in range(min(3, length)):
        if sequence[start].lower() != "g":
            continue
        first_gly = start
        if length == 3:
            break
        if length > 3 and all(residue.lower() == "g" for residue in sequence[start::3]):
            return True, first_gly
    return False, first_gly