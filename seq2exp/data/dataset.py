"""
Container pairing biological sequences with expression labels.
"""

import logging
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from seq2exp.sequence.consensus import build_consensus
from seq2exp.sequence.encoding import sequence_length

logger = logging.getLogger(__name__)


class SequenceDataset:
    """
    Validated collection of equal-length sequences and their labels.

    Labels are either a vector with one value per sequence, shape
    (num_sequences,), or a matrix with one column per sequence, shape
    (num_features, num_sequences).

    Args:
        sequences: Equal-length sequence strings. Pad them beforehand
            if they differ in length.
        labels: Label vector or matrix (anything numpy can convert)
        feature_names: Optional name per label row (exactly one name
            for vector labels)
        get_consensus: If True, compute and store the consensus sequence
        dtype: Convert labels to this numpy dtype

    Raises:
        EmptyInputError: If no sequences are given
        LengthMismatchError: If the sequences differ in length
        ValueError: If labels or feature names do not fit the sequences

    Example:
        >>> ds = SequenceDataset(["ATCG", "GGTA"], [1.2, 3.4])
        >>> ds2 = SequenceDataset(["ATCG", "GGTA"], [[1.2, 2.3], [3.4, 4.5]],
        ...                       feature_names=["exp1", "exp2"])
    """

    def __init__(
        self,
        sequences: Sequence[str],
        labels: Union[Sequence[float], np.ndarray],
        feature_names: Optional[Sequence[str]] = None,
        get_consensus: bool = False,
        dtype: Optional[type] = None
    ):
        sequences = tuple(sequences)
        sequence_length(sequences)

        labels = np.array(labels, dtype=dtype)
        if labels.ndim not in (1, 2):
            raise ValueError(
                f"Labels must be a vector or a matrix, got {labels.ndim} dimensions"
            )
        if labels.shape[-1] != len(sequences):
            raise ValueError(
                f"Number of sequences ({len(sequences)}) must match "
                f"number of labels ({labels.shape[-1]})"
            )

        if feature_names is not None:
            feature_names = tuple(feature_names)
            expected = 1 if labels.ndim == 1 else labels.shape[0]
            if len(feature_names) != expected:
                raise ValueError(
                    f"Expected {expected} feature names for labels of shape "
                    f"{labels.shape}, got {len(feature_names)}"
                )

        self.sequences = sequences
        self.labels = labels
        self.feature_names = feature_names
        self.consensus = build_consensus(sequences) if get_consensus else None

        logger.info(
            "Built dataset of %d sequences of length %d with %d label feature(s)",
            len(sequences), len(sequences[0]), self.feature_count
        )

    def __len__(self) -> int:
        return len(self.sequences)

    @property
    def sequence_length(self) -> int:
        return len(self.sequences[0])

    @property
    def feature_count(self) -> int:
        """Number of label features: 1 for vector labels, else the row count."""
        return 1 if self.labels.ndim == 1 else self.labels.shape[0]

    def has_consensus(self) -> bool:
        return self.consensus is not None

    def get_consensus(self) -> str:
        """Return the consensus sequence, raising ValueError if none was computed."""
        if self.consensus is None:
            raise ValueError("Dataset does not have a consensus sequence.")
        return self.consensus

    def get_sequence_and_labels(self) -> Tuple[List[str], np.ndarray]:
        return list(self.sequences), self.labels

    def get_feature_names(self) -> Optional[List[str]]:
        if self.feature_names is None:
            return None
        return list(self.feature_names)
