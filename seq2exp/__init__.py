"""
seq2exp: Sequence-to-expression datasets as numeric tensors

This package provides tools for:
- Pairing biological sequences with expression labels
- Inferring nucleotide vs. amino acid alphabets
- Consensus sequences and common-end trimming
- Dense one-hot and sparse mutation tensor encoding

Built on top of NumPy. Tensors have shape
(channels, sequence_length, 1, num_sequences).
"""

__version__ = "0.1.0"
__author__ = "seq2exp Contributors"

from seq2exp.exceptions import (
    Seq2ExpError,
    EmptyInputError,
    LengthMismatchError,
    UnrecognizedAlphabetError,
    InvalidConsensusCharacterError,
)

from seq2exp.sequence import (
    Alphabet,
    infer_alphabet,
    build_consensus,
    consensus_to_bitmatrix,
    consensus_to_bitmatrix_auto,
    longest_common_prefix,
    longest_common_suffix,
    trim_common_ends,
    encode,
    encode_auto,
    encode_mutations,
)

from seq2exp.data import (
    SequenceDataset,
    OnehotDataset,
)

__all__ = [
    # Errors
    "Seq2ExpError",
    "EmptyInputError",
    "LengthMismatchError",
    "UnrecognizedAlphabetError",
    "InvalidConsensusCharacterError",
    # Sequence operations
    "Alphabet",
    "infer_alphabet",
    "build_consensus",
    "consensus_to_bitmatrix",
    "consensus_to_bitmatrix_auto",
    "longest_common_prefix",
    "longest_common_suffix",
    "trim_common_ends",
    "encode",
    "encode_auto",
    "encode_mutations",
    # Datasets
    "SequenceDataset",
    "OnehotDataset",
]
