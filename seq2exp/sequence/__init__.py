"""
Sequence-level operations for seq2exp.

This module provides functions for:
- Alphabet inference (nucleotide vs. amino acid)
- Consensus sequences and consensus bit matrices
- Trimming of common prefixes and suffixes
- Dense one-hot and sparse mutation tensor encoding
"""

from seq2exp.sequence.alphabet import (
    Alphabet,
    channel_of,
    infer_alphabet,
    NUCLEOTIDE_VOCAB,
    NUCLEOTIDE_LETTERS,
    VALID_NUCLEOTIDES,
    AMINO_ACID_LETTERS,
    AMINO_ACID_VOCAB,
)

from seq2exp.sequence.encoding import (
    one_hot_encode,
    encode,
    encode_auto,
    encode_mutations,
    sequence_length,
    DEFAULT_DTYPE,
)

from seq2exp.sequence.consensus import (
    build_consensus,
    consensus_to_bitmatrix,
    consensus_to_bitmatrix_auto,
    consensus_mismatches,
)

from seq2exp.sequence.trim import (
    longest_common_prefix,
    longest_common_suffix,
    trim_common_ends,
)

__all__ = [
    "Alphabet",
    "channel_of",
    "infer_alphabet",
    "NUCLEOTIDE_VOCAB",
    "NUCLEOTIDE_LETTERS",
    "VALID_NUCLEOTIDES",
    "AMINO_ACID_LETTERS",
    "AMINO_ACID_VOCAB",
    "one_hot_encode",
    "encode",
    "encode_auto",
    "encode_mutations",
    "sequence_length",
    "DEFAULT_DTYPE",
    "build_consensus",
    "consensus_to_bitmatrix",
    "consensus_to_bitmatrix_auto",
    "consensus_mismatches",
    "longest_common_prefix",
    "longest_common_suffix",
    "trim_common_ends",
]
