"""
One-hot tensor encoders for nucleotide and amino acid sequences.

Tensors have shape (channels, sequence_length, 1, num_sequences). The
size-1 third axis keeps the layout compatible with 2D-convolution
tooling and carries no meaning.
"""

import logging
from typing import Sequence

import numpy as np

from seq2exp.exceptions import EmptyInputError, LengthMismatchError
from seq2exp.sequence.alphabet import Alphabet, channel_of, infer_alphabet

logger = logging.getLogger(__name__)

DEFAULT_DTYPE = np.float32


def sequence_length(sequences: Sequence[str]) -> int:
    """
    Return the common length of a collection of sequences.

    Raises:
        EmptyInputError: If the collection is empty
        LengthMismatchError: If the sequences differ in length
    """
    if len(sequences) == 0:
        raise EmptyInputError("At least one sequence is required")

    lengths = {len(seq) for seq in sequences}
    if len(lengths) != 1:
        raise LengthMismatchError(
            f"All sequences must have the same length, got lengths {sorted(lengths)}"
        )
    return lengths.pop()


def one_hot_encode(
    sequence: str,
    alphabet: Alphabet = Alphabet.NUCLEOTIDE,
    dtype: type = DEFAULT_DTYPE
) -> np.ndarray:
    """
    One-hot encode a single sequence.

    Args:
        sequence: Sequence string (any case)
        alphabet: Alphabet giving the channel order
        dtype: numpy dtype of the result

    Returns:
        numpy array of shape (channels, len(sequence)). Unknown symbols
        such as "N" give an all-zero column.

    Example:
        >>> one_hot_encode("ACN")
        array([[1., 0., 0.],
               [0., 1., 0.],
               [0., 0., 0.],
               [0., 0., 0.]], dtype=float32)
    """
    encoding = np.zeros((alphabet.channels, len(sequence)), dtype=dtype)

    for i, char in enumerate(sequence):
        index = channel_of(char, alphabet)
        if index is not None:
            encoding[index, i] = 1

    return encoding


def encode(
    sequences: Sequence[str],
    alphabet: Alphabet,
    dtype: type = DEFAULT_DTYPE
) -> np.ndarray:
    """
    Encode equal-length sequences as a dense one-hot tensor.

    Args:
        sequences: Non-empty list of equal-length sequences
        alphabet: Alphabet of the sequences
        dtype: numpy dtype of the tensor

    Returns:
        numpy array of shape (channels, seq_length, 1, num_sequences),
        4 channels for nucleotides and 20 for amino acids

    Raises:
        EmptyInputError: If no sequences are given
        LengthMismatchError: If the sequences differ in length

    Example:
        >>> encode(["ATCG", "GCTA", "TTAA"], Alphabet.NUCLEOTIDE).shape
        (4, 4, 1, 3)
    """
    seq_len = sequence_length(sequences)
    tensor = np.zeros((alphabet.channels, seq_len, 1, len(sequences)), dtype=dtype)

    for seq_idx, sequence in enumerate(sequences):
        tensor[:, :, 0, seq_idx] = one_hot_encode(sequence, alphabet, dtype)

    logger.debug("Encoded %d %s sequences into tensor %s",
                 len(sequences), alphabet.value, tensor.shape)
    return tensor


def encode_auto(sequences: Sequence[str], dtype: type = DEFAULT_DTYPE) -> np.ndarray:
    """
    Infer the alphabet of the sequences and encode them.

    Raises:
        UnrecognizedAlphabetError: If the alphabet cannot be inferred
    """
    if len(sequences) == 0:
        raise EmptyInputError("At least one sequence is required")
    return encode(sequences, infer_alphabet(sequences), dtype)


def encode_mutations(
    sequences: Sequence[str],
    consensus: str,
    prefix_offset: int = 0,
    dtype: type = DEFAULT_DTYPE
) -> np.ndarray:
    """
    Encode only the deviations of each sequence from a consensus.

    The alphabet is inferred from the sequences themselves. A position
    is one-hot encoded when its character differs
    (case-insensitively) from the consensus at that position, and left
    all-zero when it matches. Positions past the end of the consensus
    are always encoded.

    Args:
        sequences: Non-empty list of equal-length (possibly trimmed) sequences
        consensus: Consensus of the untrimmed sequences
        prefix_offset: Number of leading characters trimmed from the
            sequences; the consensus is shifted by the same amount when
            0 < prefix_offset < len(consensus)
        dtype: numpy dtype of the tensor

    Returns:
        numpy array of shape (channels, seq_length, 1, num_sequences)

    Raises:
        EmptyInputError: If no sequences are given
        LengthMismatchError: If the sequences differ in length
        UnrecognizedAlphabetError: If the alphabet cannot be inferred

    Example:
        >>> X_mut = encode_mutations(["ATCG", "ATGG"], "ATCG")
        >>> int(X_mut.sum()), int(X_mut[2, 2, 0, 1])
        (1, 1)
    """
    if len(sequences) == 0:
        raise EmptyInputError("At least one sequence is required")
    alphabet = infer_alphabet(sequences)

    if 0 < prefix_offset < len(consensus):
        consensus = consensus[prefix_offset:]
    consensus = [char.upper() for char in consensus]
    cons_len = len(consensus)

    seq_len = sequence_length(sequences)
    tensor = np.zeros((alphabet.channels, seq_len, 1, len(sequences)), dtype=dtype)

    for seq_idx, sequence in enumerate(sequences):
        for pos, char in enumerate(sequence):
            char = char.upper()
            if pos < cons_len and char == consensus[pos]:
                continue
            index = channel_of(char, alphabet)
            if index is not None:
                tensor[index, pos, 0, seq_idx] = 1

    logger.debug("Encoded mutations of %d sequences against consensus of length %d",
                 len(sequences), cons_len)
    return tensor
