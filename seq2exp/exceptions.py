"""
Errors raised by seq2exp.

Every error derives from ValueError, so code that already guards
encoding calls with ``except ValueError`` keeps working.
"""

from typing import Iterable


class Seq2ExpError(ValueError):
    """Base class for all seq2exp errors."""


class EmptyInputError(Seq2ExpError):
    """No sequences were supplied to an operation that needs at least one."""


class LengthMismatchError(Seq2ExpError):
    """Sequences of unequal length reached an operation that needs uniform length."""


class UnrecognizedAlphabetError(Seq2ExpError):
    """
    The characters of a sequence collection are neither nucleotide nor amino acid.

    Attributes:
        characters: Sorted upper-case characters outside the amino acid alphabet
    """

    def __init__(self, characters: Iterable[str]):
        self.characters = tuple(sorted(characters))
        super().__init__(
            "Cannot infer sequence type - sequences contain non-standard "
            f"biological characters: {''.join(self.characters)}"
        )


class InvalidConsensusCharacterError(Seq2ExpError):
    """
    A consensus character has no channel in the strict alphabet.

    Attributes:
        character: The offending character
        position: 0-based position in the consensus string
    """

    def __init__(self, character: str, position: int, allowed: str):
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid character '{character}' at position {position}. "
            f"Only {allowed} are allowed (no ambiguity codes)."
        )
