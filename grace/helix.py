"""Triple-helix record: strands, register bookkeeping and text reports."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field

STRANDS = 3
OFFSETS = 9
REGISTER_SLOTS = 4

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"
BLUE = "\x1b[34m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"

_RESIDUE_STYLE = {
    "K": BOLD + BLUE,
    "R": BLUE,
    "E": BOLD + RED,
    "D": BOLD + RED,
    "F": BOLD,
    "Y": BOLD,
    "W": BOLD,
    "Q": BOLD + GREEN,
}


def _grid() -> list[list[list[list[float]]]]:
    return [
        [[[0.0] * OFFSETS for _ in range(STRANDS)] for _ in range(STRANDS)]
        for _ in range(STRANDS)
    ]


def _register() -> list[int]:
    return [0] * REGISTER_SLOTS


def _num(value: float) -> str:
    return f"{value:g}"


@dataclass
class TripleHelix:
    """A set of up to three peptide strands and the scores of their registers.

    Register lists hold the leading, middle and trailing peptide followed by
    the offset index (0 is the canonical stagger).
    """

    num_pep: int = 0
    num_aa: int = 0
    sequences: list[str] = field(default_factory=lambda: [""] * STRANDS)
    nterm: str = "initial"
    cterm: str = "initial"

    exp_tm: float = 0.0
    cc_tm: float = 0.0
    high_tm: float = 0.0
    deviation: float = 0.0
    sec_tm: float = 0.0
    specificity: float = 0.0

    best_register: list[int] = field(default_factory=_register)
    sec_register: list[int] = field(default_factory=_register)
    cc_register: list[int] = field(default_factory=_register)

    best_propensity: float = 0.0
    best_pairwise: float = 0.0
    propensity: list[list[list[list[float]]]] = field(default_factory=_grid)
    pairwise: list[list[list[list[float]]]] = field(default_factory=_grid)
    tm: list[list[list[list[float]]]] = field(default_factory=_grid)

    xaa_pos: int = -1

    def _frame(self, position: int) -> int:
        return abs(position + (3 - self.xaa_pos)) % 3

    def is_xaa(self, position: int) -> bool:
        """True if the residue at ``position`` sits in an Xaa slot."""
        return self._frame(position) == 0

    def is_yaa(self, position: int) -> bool:
        """True if the residue at ``position`` sits in a Yaa slot."""
        return self._frame(position) == 1

    def is_gly(self, position: int) -> bool:
        """True if the residue at ``position`` sits in a Gly slot."""
        return self._frame(position) == 2

    def determine_repetition(self) -> bool:
        """Set ``xaa_pos`` from the Gly repeat of the first strand.

        Returns whether a Gly-every-third-residue pattern was found; if not,
        a ``RuntimeWarning`` carrying the helix report is issued and
        ``xaa_pos`` is left unchanged.
        """
        counts = [0, 0, 0]
        for position, residue in enumerate(self.sequences[0][: self.num_aa]):
            if residue == "G":
                counts[position % 3] += 1

        threshold = self.num_aa // 3
        found = False
        # Later frames take precedence, matching the order of the checks.
        for frame, xaa_pos in ((0, 1), (1, 2), (2, 0)):
            if counts[frame] >= threshold:
                found = True
                self.xaa_pos = xaa_pos
        if not found:
            warnings.warn(
                "This peptide does not appear to have a Gly every third residue!\n"
                + self.dissect(),
                RuntimeWarning,
                stacklevel=2,
            )
        return found

    @staticmethod
    def _register_text(register: list[int]) -> str:
        return f"{register[0]},{register[1]},{register[2]}.{register[3]}"

    def dissect(self) -> str:
        """Return a plain-text report of the helix and its scores."""
        lines = [f"numPep = {self.num_pep}", f"numAA =  {self.num_aa}"]
        lines += [strand[: self.num_aa] for strand in self.sequences[: self.num_pep]]
        lines += [
            f"termination: {self.nterm} {self.cterm}",
            f"XaaPos = {self.xaa_pos}",
            f"expTm = {_num(self.exp_tm)}. CCTm = {_num(self.cc_tm)}. "
            f"Deviation = {_num(self.deviation)}",
            f"CCregister = {self._register_text(self.cc_register)}",
            f"High Tm = {_num(self.high_tm)} = {_num(self.best_propensity)} "
            f"+ {_num(self.best_pairwise)}",
            f"Best register = {self._register_text(self.best_register)}",
            f"Second highest Tm = {_num(self.sec_tm)}",
            f"Second Best register = {self._register_text(self.sec_register)}",
            f"Specificity = {_num(self.specificity)}.",
            "",
        ]
        return "\n".join(lines) + "\n"

    def _strand_lines(self, register: list[int], color: bool) -> list[str]:
        lines = []
        for peptide, gap in zip(register[:3], (": ", ":  ", ":   ")):
            residues = self.sequences[peptide][: self.num_aa]
            if color:
                body = "".join(
                    f"{_RESIDUE_STYLE.get(residue, '')}{residue}{RESET}"
                    for residue in residues
                )
            else:
                body = residues
            lines.append(f"{peptide}{gap}{body}")
        return lines

    def _composition_warning(self) -> bool:
        first, middle, last = self.best_register[:3]
        if self.num_pep == 2:
            return first == middle == last
        if self.num_pep == 3:
            return not (first != middle and first != last and middle != last)
        return False

    def user_output(self, color: bool = True) -> str:
        """Return the user-facing summary, optionally with ANSI colouring."""
        best = self.best_register
        sec = self.sec_register
        lines = [
            "",
            "-" * 58,
            f"The most stable register/composition is {{{best[0]}{best[1]}{best[2]}}}. "
            f"Tm = {_num(self.high_tm)}.",
        ]
        if self._composition_warning():
            lines.append(
                "WARNING: The most stable register/composition does not include "
                "all the peptides you input."
            )
        lines += self._strand_lines(best, color)

        if self.num_pep != 1:
            lines += [
                "",
                f"The second most stable register/composition is "
                f"{{{sec[0]}{sec[1]}{sec[2]}}}. Tm = {_num(self.sec_tm)}.",
            ]
            lines += self._strand_lines(sec, color)
            lines += ["", f"The specificity is = {_num(self.specificity)}.", ""]

        lines += [
            "Melting temperatures of all canonical registers.",
            "Best in blue, second best in red.",
            "Tm < 10C faded to indicate experimentally unreliable (frequently will not fold).",
        ]
        peptides = range(self.num_pep)
        for a in peptides:
            for b in peptides:
                for c in peptides:
                    value = self.tm[a][b][c][0]
                    text = f"{{{a}{b}{c}}} = {_num(value)}"
                    if color:
                        style = ""
                        if (a, b, c) == tuple(best[:3]):
                            style += BOLD + BLUE
                        if (a, b, c) == tuple(sec[:3]):
                            style += BOLD + RED
                        if value < 10:
                            style += DIM
                        text = f"{RESET}{style}{text}{RESET}"
                    lines.append(text)
            lines.append("")
        return "\n".join(lines) + "\n"