"""
Consensus sequences and their strict bit-matrix form.

The consensus is a per-position majority vote over aligned,
equal-length sequences.
"""

from typing import List, Sequence

import numpy as np

from seq2exp.exceptions import InvalidConsensusCharacterError
from seq2exp.sequence.alphabet import Alphabet, infer_alphabet
from seq2exp.sequence.encoding import sequence_length


def build_consensus(sequences: Sequence[str]) -> str:
    """
    Compute the consensus sequence of equal-length strings.

    For each position the most frequent character wins. Characters are
    counted as stored (case-sensitive), over every character present
    anywhere in the input, so ambiguity codes such as "N" may appear in
    the result. Ties go to the lexicographically smallest character.

    Args:
        sequences: Non-empty list of strings of identical length

    Returns:
        Consensus string of the same length as the inputs

    Raises:
        EmptyInputError: If no sequences are given
        LengthMismatchError: If the sequences differ in length

    Example:
        >>> build_consensus(["ATCG", "ACCG", "ATCA"])
        'ATCG'
        >>> build_consensus(["AT", "GC"])
        'AC'
    """
    seq_len = sequence_length(sequences)
    if seq_len == 0:
        return ""

    # (num_sequences, seq_len) character grid
    grid = np.array([list(seq) for seq in sequences])
    unique_chars = sorted(set(grid.ravel()))

    counts = np.stack([(grid == char).sum(axis=0) for char in unique_chars])
    # argmax returns the first maximum, i.e. the smallest character on ties
    winners = counts.argmax(axis=0)

    return "".join(unique_chars[i] for i in winners)


def consensus_to_bitmatrix(consensus: str, alphabet: Alphabet) -> np.ndarray:
    """
    Convert a consensus sequence to a strict one-hot bit matrix.

    Unlike the tensor encoders, which leave unknown symbols as all-zero
    columns, every consensus character must map to exactly one channel.

    Args:
        consensus: Consensus sequence (any case)
        alphabet: Alphabet giving the row order

    Returns:
        Boolean array of shape (channels, len(consensus))

    Raises:
        InvalidConsensusCharacterError: On any character outside the
            alphabet, including ambiguity codes like "N"

    Example:
        >>> consensus_to_bitmatrix("ATCG", Alphabet.NUCLEOTIDE).astype(int)
        array([[1, 0, 0, 0],
               [0, 0, 1, 0],
               [0, 0, 0, 1],
               [0, 1, 0, 0]])
    """
    if alphabet is Alphabet.NUCLEOTIDE:
        allowed = "A, C, G, T, U"
    else:
        allowed = "the 20 standard amino acids"

    vocab = alphabet.vocab
    strict = alphabet.strict_letters
    bit_matrix = np.zeros((alphabet.channels, len(consensus)), dtype=bool)

    for pos, char in enumerate(consensus):
        char = char.upper()
        if char not in strict:
            raise InvalidConsensusCharacterError(char, pos, allowed)
        bit_matrix[vocab[char], pos] = True

    return bit_matrix


def consensus_to_bitmatrix_auto(consensus: str) -> np.ndarray:
    """Infer the alphabet of a consensus and convert it to a bit matrix."""
    return consensus_to_bitmatrix(consensus, infer_alphabet([consensus]))


def consensus_mismatches(sequence: str, consensus: str) -> List[int]:
    """
    Positions where a sequence deviates from a consensus.

    Comparison is case-insensitive and limited to the shorter string.

    Example:
        >>> consensus_mismatches("ATGG", "ATCG")
        [2]
    """
    return [
        i for i, (a, b) in enumerate(zip(sequence.upper(), consensus.upper()))
        if a != b
    ]
