"""
Biological alphabets and alphabet inference.

Sequences are classified as nucleotide (DNA/RNA) or amino acid from
the characters they contain. Each alphabet carries a fixed channel
order used by the tensor encoders.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, Optional

from seq2exp.exceptions import EmptyInputError, UnrecognizedAlphabetError

logger = logging.getLogger(__name__)

# Channel mapping, T and U share the fourth channel
NUCLEOTIDE_VOCAB = {"A": 0, "C": 1, "G": 2, "T": 3, "U": 3}

# Characters accepted when inferring a nucleotide alphabet
NUCLEOTIDE_LETTERS = frozenset("ACGTUN")

# Characters accepted in a nucleotide consensus bit matrix
VALID_NUCLEOTIDES = frozenset("ACGTU")

# Standard 20 amino acids in alphabetical order
AMINO_ACID_LETTERS = "ACDEFGHIKLMNPQRSTVWY"
AMINO_ACID_SET = frozenset(AMINO_ACID_LETTERS)
AMINO_ACID_VOCAB = {aa: i for i, aa in enumerate(AMINO_ACID_LETTERS)}


class Alphabet(Enum):
    """Closed set of sequence alphabets understood by the encoders."""

    NUCLEOTIDE = "nucleotide"
    AMINO_ACID = "amino_acid"

    @property
    def vocab(self) -> Dict[str, int]:
        """Mapping from upper-case symbol to 0-based channel index."""
        if self is Alphabet.NUCLEOTIDE:
            return NUCLEOTIDE_VOCAB
        return AMINO_ACID_VOCAB

    @property
    def letters(self) -> str:
        """Canonical symbol per channel, in channel order."""
        if self is Alphabet.NUCLEOTIDE:
            return "ACGT"
        return AMINO_ACID_LETTERS

    @property
    def channels(self) -> int:
        return len(self.letters)

    @property
    def strict_letters(self) -> frozenset:
        """Symbols allowed in a consensus bit matrix."""
        if self is Alphabet.NUCLEOTIDE:
            return VALID_NUCLEOTIDES
        return AMINO_ACID_SET


def channel_of(char: str, alphabet: Alphabet) -> Optional[int]:
    """
    Look up the channel index of a single symbol.

    Args:
        char: Single character, any case
        alphabet: Alphabet whose channel order applies

    Returns:
        0-based channel index, or None for symbols with no channel
        (e.g. the ambiguity code "N")

    Example:
        >>> channel_of("u", Alphabet.NUCLEOTIDE)
        3
        >>> channel_of("N", Alphabet.NUCLEOTIDE) is None
        True
    """
    return alphabet.vocab.get(char.upper())


def infer_alphabet(sequences: Iterable[str]) -> Alphabet:
    """
    Infer whether sequences are nucleotides or amino acids.

    All characters are upper-cased and pooled. Nucleotides are checked
    first since their letters are (apart from U) also amino acid letters.

    Args:
        sequences: Non-empty collection of sequence strings

    Returns:
        Alphabet.NUCLEOTIDE if every character is one of A, C, G, T, U, N;
        otherwise Alphabet.AMINO_ACID if every character is a standard residue

    Raises:
        EmptyInputError: If no sequences are given
        UnrecognizedAlphabetError: If the characters fit neither alphabet

    Example:
        >>> infer_alphabet(["ATCG", "GCTA"])
        <Alphabet.NUCLEOTIDE: 'nucleotide'>
        >>> infer_alphabet(["ACDE", "FGHI"])
        <Alphabet.AMINO_ACID: 'amino_acid'>
    """
    unique_chars = set()
    count = 0
    for sequence in sequences:
        unique_chars.update(sequence.upper())
        count += 1

    if count == 0:
        raise EmptyInputError("Cannot infer the alphabet of an empty collection")

    if unique_chars <= NUCLEOTIDE_LETTERS:
        logger.debug("Inferred sequence type: %s", Alphabet.NUCLEOTIDE.value)
        return Alphabet.NUCLEOTIDE

    if unique_chars <= AMINO_ACID_SET:
        logger.debug("Inferred sequence type: %s", Alphabet.AMINO_ACID.value)
        return Alphabet.AMINO_ACID

    logger.debug("Could not infer sequence type from %d characters", len(unique_chars))
    raise UnrecognizedAlphabetError(unique_chars - AMINO_ACID_SET)
