"""
One-hot encoded view of a SequenceDataset.

Pairs the raw sequences and labels with their tensors so a model can
consume ``X`` (features) and ``Y`` (labels) directly.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from seq2exp.data.dataset import SequenceDataset
from seq2exp.sequence.encoding import DEFAULT_DTYPE, encode_auto, encode_mutations
from seq2exp.sequence.trim import trim_common_ends

logger = logging.getLogger(__name__)


class OnehotDataset:
    """
    A sequence dataset together with its one-hot encoded tensors.

    The tensors are computed once at construction and never updated.
    When the raw dataset carries a consensus, a mutation tensor marking
    only the deviations from it is built as well.

    Args:
        raw_data: The validated sequence/label dataset
        trim: If True, strip the prefix and suffix shared by all sequences
            before encoding
        dtype: numpy dtype of the tensors. Defaults to the label dtype
            when it is floating point, float32 otherwise.

    Attributes:
        raw_data: The dataset that was encoded
        onehot_sequences: Tensor of shape (channels, length, 1, num_sequences)
        mutation_sequences: Mutation tensor of the same shape, or None
            without a consensus
        prefix_offset: Length of the trimmed common prefix
        x_dim: (channels, length) of the encoded features
        y_dim: Number of label features

    Example:
        >>> ds = SequenceDataset(["ATCG", "GGTA"], [1.0, 2.0])
        >>> ods = OnehotDataset(ds)
        >>> ods.X.shape
        (4, 4, 1, 2)
    """

    def __init__(
        self,
        raw_data: SequenceDataset,
        trim: bool = True,
        dtype: Optional[type] = None
    ):
        if dtype is None:
            if np.issubdtype(raw_data.labels.dtype, np.floating):
                dtype = raw_data.labels.dtype.type
            else:
                dtype = DEFAULT_DTYPE

        prefix_offset, strs2encode = 0, list(raw_data.sequences)
        if trim:
            prefix_offset, strs2encode = trim_common_ends(strs2encode)

        onehot = encode_auto(strs2encode, dtype=dtype)
        mutations = None
        if raw_data.has_consensus():
            mutations = encode_mutations(
                strs2encode, raw_data.consensus, prefix_offset, dtype=dtype
            )

        onehot.flags.writeable = False
        if mutations is not None:
            mutations.flags.writeable = False

        self.raw_data = raw_data
        self.onehot_sequences = onehot
        self.mutation_sequences = mutations
        self.prefix_offset = prefix_offset
        self.x_dim = (onehot.shape[0], onehot.shape[1])
        self.y_dim = raw_data.feature_count

        logger.debug("One-hot tensor %s, prefix offset %d", onehot.shape, prefix_offset)

    @property
    def X(self) -> np.ndarray:
        return self.onehot_sequences

    @property
    def X_mut(self) -> Optional[np.ndarray]:
        return self.mutation_sequences

    @property
    def Y(self) -> np.ndarray:
        return self.raw_data.labels

    def get_onehot(self) -> np.ndarray:
        return self.onehot_sequences

    def get_mutations(self) -> np.ndarray:
        """Return the mutation tensor, raising ValueError without a consensus."""
        if self.mutation_sequences is None:
            raise ValueError("Dataset does not have a consensus sequence.")
        return self.mutation_sequences

    def get_label(self) -> np.ndarray:
        return self.raw_data.labels

    def get_label_names(self) -> Optional[List[str]]:
        return self.raw_data.get_feature_names()

    def get_x(self) -> np.ndarray:
        return self.X

    def get_y(self) -> np.ndarray:
        return self.Y

    def get_xy(self) -> Tuple[np.ndarray, np.ndarray]:
        return self.X, self.Y

    def get_x_dim(self) -> Tuple[int, int]:
        return self.x_dim

    def get_y_dim(self) -> int:
        return self.y_dim

    def get_prefix_offset(self) -> int:
        return self.prefix_offset
