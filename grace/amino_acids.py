"""Table of residues allowed at Xaa and Yaa positions, read from CSV."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

_INTEGER = re.compile(r"\s*([+-]?\d+)")


class AminoAcidTableError(ValueError):
    """Raised when the amino-acid table cannot be read or holds bad values."""


@dataclass(frozen=True)
class AminoAcidTable:
    """Lower-case residues and whether each may appear at Xaa and Yaa."""

    residues: tuple[str, ...]
    xaa_allowed: tuple[bool, ...]
    yaa_allowed: tuple[bool, ...]

    @property
    def excluded_xaa(self) -> list[str]:
        return [r for r, ok in zip(self.residues, self.xaa_allowed) if not ok]

    @property
    def excluded_yaa(self) -> list[str]:
        return [r for r, ok in zip(self.residues, self.yaa_allowed) if not ok]

    def is_valid(self, residue: str) -> bool:
        """True if ``residue`` (any case) is listed in the table."""
        return residue.lower() in self.residues


def _flag(item: str, slot: str, line_number: int) -> bool:
    match = _INTEGER.match(item)
    if match is None:
        raise AminoAcidTableError(
            f"Invalid {slot} value found on line {line_number}. Must be a number (0 or 1)."
        )
    value = int(match.group(1))
    if value not in (0, 1):
        raise AminoAcidTableError(
            f"Invalid {slot} value '{value}' found on line {line_number}. "
            "Only '0' and '1' are allowed."
        )
    return value == 1


def parse_amino_acids(lines: Iterable[str] | str) -> AminoAcidTable:
    """Parse CSV rows of residue, Xaa flag and Yaa flag after a header line."""
    if isinstance(lines, str):
        lines = lines.splitlines()
    rows = iter(lines)
    next(rows, None)
    residues: list[str] = []
    xaa: list[bool] = []
    yaa: list[bool] = []
    for line_number, line in enumerate(rows, 2):
        items = line.rstrip("\r\n").split(",")
        items += [""] * (3 - len(items))
        residue = items[0].strip()
        if not residue:
            raise AminoAcidTableError(f"Missing amino acid on line {line_number}.")
        residues.append(residue[0].lower())
        xaa.append(_flag(items[1], "Xaa", line_number))
        yaa.append(_flag(items[2], "Yaa", line_number))
    return AminoAcidTable(tuple(residues), tuple(xaa), tuple(yaa))


def load_amino_acids(path: str | Path = "AminoAcids.csv") -> AminoAcidTable:
    """Read and parse an amino-acid table file."""
    try:
        with open(path, encoding="utf-8") as handle:
            return parse_amino_acids(handle)
    except OSError as error:
        raise AminoAcidTableError(f"Unable to open file {path}: {error}") from error