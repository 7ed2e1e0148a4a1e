"""Interactive collection of the run settings.

Every prompt goes through an ``ask`` callable that shows a message and
returns the user's reply, as :func:`input` does. When a reply is rejected,
the explanation is shown together with the next prompt.
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from dataclasses import dataclass

from grace.amino_acids import AminoAcidTable
from grace.ga_parameters import find_gly_at_every_third

Ask = Callable[[str], str]

MOTIF_PEPTIDES = 3


@dataclass(frozen=True)
class UserSettings:
    """Choices made by the user before the search starts."""

    have_motif: bool
    aab: bool
    length: int
    target_tm: int
    target_spec: int
    motif_length: int = -1
    motifs: tuple[str, ...] = ()
    first_gly: int = -1


def validate_motif(text: str, length: int, valid_residues: Collection[str]) -> tuple[str, int]:
    """Check a motif and return it in upper case with the position of its first Gly.

    Raises ``ValueError`` when the length is wrong, a residue is not in
    ``valid_residues`` (lower-case letters) or the motif lacks a Gly at every
    third residue.
    """
    if len(text) != length:
        raise ValueError("Invalid input length. Please try again.")
    if any(residue.lower() not in valid_residues for residue in text):
        raise ValueError(
            "Invalid amino acid found. Please make sure the sequence only include "
            "canonical amino acids."
        )
    sequence = text.upper()
    collagen_like, first_gly = find_gly_at_every_third(sequence)
    if not collagen_like:
        raise ValueError("Please make sure the input sequence is a collagen-like sequence. ")
    return sequence, first_gly


def prompt_int(ask: Ask, message: str, retry: str, low: int, high: int) -> int:
    """Ask until the reply is an integer from ``low`` to ``high``."""
    while True:
        reply = ask(message).strip()
        try:
            value = int(reply)
        except ValueError:
            value = None
        if value is not None and low <= value <= high:
            return value
        message = retry


def prompt_motif(
    ask: Ask,
    index: int,
    length: int,
    valid_residues: Collection[str],
    first_gly: int | None,
) -> tuple[str, int]:
    """Ask for motif number ``index`` until a valid one is given.

    When ``first_gly`` is not None, the motif's Gly frame must match it.
    Returns the upper-case motif and the position of its first Gly.
    """
    request = f"Please enter your sequence {index}: \n"
    message = request
    while True:
        words = ask(message).split()
        text = words[0] if words else ""
        try:
            sequence, gly = validate_motif(text, length, valid_residues)
        except ValueError as error:
            message = f"{error}\n{request}"
            continue
        if first_gly is not None and gly != first_gly:
            message = f"Glycine positions do not matched. Please try again.\n{request}"
            continue
        return sequence, gly


def collect_settings(ask: Ask, table: AminoAcidTable) -> UserSettings:
    """Ask for the kind of heterotrimer, its length or motifs, and the targets."""
    have_motif = (
        prompt_int(
            ask,
            "Do you want to generate a heterotrimer or a heterotrimer including "
            "recognition epitope?\nPlease enter '0' for novel heterotrimer or '1' "
            "heterotrimer including recognition epitope. \n",
            "Please enter either '0' or '1': \n",
            0,
            1,
        )
        == 1
    )

    aab = False
    length = -1
    motif_length = -1
    motifs: list[str] = []
    first_gly = -1
    if have_motif:
        motif_length = prompt_int(
            ask,
            "Please specify the number of amino acids present in your sequences\n"
            " (more than 3 and less than 15) \n",
            "Please enter a valid number\n",
            3,
            15,
        )
        valid = set(table.residues)
        anchor: int | None = None
        for index in range(1, MOTIF_PEPTIDES + 1):
            sequence, gly = prompt_motif(ask, index, motif_length, valid, anchor)
            if anchor is None:
                anchor = gly
            motifs.append(sequence)
        first_gly = anchor if anchor is not None else -1
    else:
        aab = (
            prompt_int(
                ask,
                "Do you want to generate AAB or ABC heterotrimer?\n"
                "Please enter '0' for AAB or '1' for ABC.\n",
                "Please enter either '0' for AAB or '1' for ABC: \n",
                0,
                1,
            )
            == 0
        )
        length = prompt_int(
            ask,
            "Please enter a number between 24 and 40 as peptide Length: \n",
            "Please enter a number between 21 and 40: \n",
            21,
            40,
        )

    target_tm = prompt_int(
        ask,
        "Please enter a number between 40 to 55 as target Tm: \n",
        "Please enter a number between 40 to 55: \n",
        30,
        70,
    )
    target_spec = prompt_int(
        ask,
        "Please enter a number between 10 to 25 as target Specificity: \n",
        "Please enter a number between 10 to 25: \n",
        10,
        35,
    )
    return UserSettings(
        have_motif=have_motif,
        aab=aab,
        length=length,
        target_tm=target_tm,
        target_spec=target_spec,
        motif_length=motif_length,
        motifs=tuple(motifs),
        first_gly=first_gly,
    )