"""Scoring parameters for triple-helix melting temperature prediction.

Parameters are read from a plain-text file made of named sections
(``Date``, ``Length``, ``FrameShift``, ``XaaPropensity``, ``YaaPropensity``,
``PairwiseLateral``, ``PairwiseAxial``).  Tables are indexed by residue
letter, with ``A`` at index 1 and ``Z`` at index 26; index 0 is unused.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from string import ascii_uppercase

TABLE_SIZE = 27
TERMINUS_TYPES = 6
_LETTERS = ascii_uppercase


class ParameterFileError(ValueError):
    """Raised when a parameter file cannot be read or is malformed."""


def aa_index(residue: str) -> int:
    """Return the table index of a one-letter residue code (A=1 ... Z=26)."""
    if len(residue) != 1 or residue.upper() not in _LETTERS:
        raise ValueError(f"not a residue letter: {residue!r}")
    return ord(residue.upper()) - 64


def _vector() -> list[float]:
    return [0.0] * TABLE_SIZE


def _matrix(size: int = TABLE_SIZE) -> list[list[float]]:
    return [[0.0] * size for _ in range(size)]


def _flags() -> list[bool]:
    return [False] * TABLE_SIZE


def _flag_matrix() -> list[list[bool]]:
    return [[False] * TABLE_SIZE for _ in range(TABLE_SIZE)]


@dataclass
class ScoringParameters:
    """Energy terms used to score a triple helix."""

    date: str = ""
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    propensity_x: list[float] = field(default_factory=_vector)
    propensity_y: list[float] = field(default_factory=_vector)
    axial: list[list[float]] = field(default_factory=_matrix)
    lateral: list[list[float]] = field(default_factory=_matrix)
    frame_shift: list[list[float]] = field(default_factory=lambda: _matrix(TERMINUS_TYPES))
    nterm_types: list[str] = field(default_factory=lambda: [""] * TERMINUS_TYPES)
    cterm_types: list[str] = field(default_factory=lambda: [""] * TERMINUS_TYPES)

    ex_a: float = 0.0
    ex_b: float = 0.0
    ex_c: float = 0.0
    ex_propensity_x: list[float] = field(default_factory=_vector)
    ex_propensity_y: list[float] = field(default_factory=_vector)
    ex_axial: list[list[float]] = field(default_factory=_matrix)
    ex_lateral: list[list[float]] = field(default_factory=_matrix)

    opt_prop_x: list[bool] = field(default_factory=_flags)
    opt_prop_y: list[bool] = field(default_factory=_flags)
    opt_axial: list[list[bool]] = field(default_factory=_flag_matrix)
    opt_lat: list[list[bool]] = field(default_factory=_flag_matrix)


class _Reader:
    """Cursor over the text that reads whole lines or whitespace-separated tokens."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def line(self) -> str:
        end = self._text.find("\n", self._pos)
        if end < 0:
            result, self._pos = self._text[self._pos:], len(self._text)
        else:
            result, self._pos = self._text[self._pos:end], end + 1
        return result

    def _skip_space(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def token(self, section: str) -> str:
        self._skip_space()
        start = self._pos
        while self._pos < len(self._text) and not self._text[self._pos].isspace():
            self._pos += 1
        if start == self._pos:
            raise ParameterFileError(f"unexpected end of file in section {section}")
        return self._text[start:self._pos]

    def char(self, section: str) -> str:
        self._skip_space()
        if self.at_end():
            raise ParameterFileError(f"unexpected end of file in section {section}")
        result = self._text[self._pos]
        self._pos += 1
        return result

    def number(self, section: str) -> float:
        token = self.token(section)
        try:
            return float(token)
        except ValueError:
            raise ParameterFileError(f"bad number {token!r} in section {section}") from None


def _residue_slot(letter: str, section: str) -> int:
    try:
        return aa_index(letter)
    except ValueError:
        raise ParameterFileError(f"bad residue {letter!r} in section {section}") from None


def _read_propensity(reader: _Reader, target: list[float], section: str) -> None:
    for _ in _LETTERS:
        slot = _residue_slot(reader.char(section), section)
        target[slot] = reader.number(section)


def _read_matrix(reader: _Reader, target: list[list[float]], section: str) -> None:
    reader.line()  # column header
    for row in range(1, TABLE_SIZE):
        reader.char(section)  # row label
        for column in range(1, TABLE_SIZE):
            target[row][column] = reader.number(section)


def _read_frame_shift(reader: _Reader, params: ScoringParameters, section: str) -> None:
    params.cterm_types = [reader.token(section) for _ in range(TERMINUS_TYPES)]
    params.nterm_types = []
    for row in range(TERMINUS_TYPES):
        params.nterm_types.append(reader.token(section))
        params.frame_shift[row] = [reader.number(section) for _ in range(TERMINUS_TYPES)]


def parse_parameters(text: str) -> ScoringParameters:
    """Parse the contents of a parameter file."""
    params = ScoringParameters()
    reader = _Reader(text)
    while not reader.at_end():
        heading = reader.line().strip()
        if heading == "Date":
            params.date = reader.token(heading)
        elif heading == "Length":
            params.a = reader.number(heading)
            params.b = reader.number(heading)
            params.c = reader.number(heading)
        elif heading == "FrameShift":
            _read_frame_shift(reader, params, heading)
        elif heading == "XaaPropensity":
            _read_propensity(reader, params.propensity_x, heading)
        elif heading == "YaaPropensity":
            _read_propensity(reader, params.propensity_y, heading)
        elif heading == "PairwiseLateral":
            _read_matrix(reader, params.lateral, heading)
        elif heading == "PairwiseAxial":
            _read_matrix(reader, params.axial, heading)
    return params


def load_parameters(path: str | Path = "parameters.txt") -> ScoringParameters:
    """Read and parse a parameter file."""
    try:
        text = Path(path).read_text()
    except OSError as error:
        raise ParameterFileError(f"cannot open parameter file {path}: {error}") from error
    return parse_parameters(text)


def _num(value: float) -> str:
    return f"{value:g}"


def _show(value: float | bool) -> str:
    if isinstance(value, bool):
        return str(int(value))
    return _num(value)


def _vector_lines(title: str, values: list) -> list[str]:
    return [title] + [f"{letter}\t{_show(values[i])}" for i, letter in enumerate(_LETTERS, 1)]


def _matrix_lines(title: str, values: list[list]) -> list[str]:
    lines = [title, "".join(f"\t{letter}" for letter in _LETTERS)]
    for row, letter in enumerate(_LETTERS, 1):
        cells = "".join(f"{_show(values[row][col])}\t" for col in range(1, TABLE_SIZE))
        lines.append(f"{letter}\t{cells}")
    return lines


def format_parameters(parameters: ScoringParameters) -> str:
    """Render optimisation flags, experimental values and current values as text."""
    p = parameters
    separator = ["EOF", "", "-" * 40, ""]
    lines = [""]
    lines += _vector_lines("OptXaaPropensity", p.opt_prop_x)
    lines += _vector_lines("OptYaaPropensity", p.opt_prop_y)
    lines += _matrix_lines("OptPairwiseLateral", p.opt_lat)
    lines += _matrix_lines("OptPairwiseAxial", p.opt_axial)
    lines += separator
    lines += ["LengthEx", _num(p.ex_a), _num(p.ex_b), _num(p.ex_c)]
    lines += _vector_lines("XaaPropensityEx", p.ex_propensity_x)
    lines += _vector_lines("YaaPropensityEx", p.ex_propensity_y)
    lines += _matrix_lines("PairwiseLateralEX", p.ex_lateral)
    lines += _matrix_lines("PairwiseAxial", p.ex_axial)
    lines += separator
    lines += ["Length", _num(p.a), _num(p.b), _num(p.c)]
    lines += _vector_lines("XaaPropensity", p.propensity_x)
    lines += _vector_lines("YaaPropensity", p.propensity_y)
    lines += _matrix_lines("PairwiseLateral", p.lateral)
    lines += _matrix_lines("PairwiseAxial", p.axial)
    lines += ["EOF", ""]
    return "\n".join(lines) + "\n"