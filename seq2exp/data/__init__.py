"""
Dataset containers.

- SequenceDataset: validated sequences paired with expression labels
- OnehotDataset: a SequenceDataset with its one-hot and mutation tensors
"""

from seq2exp.data.dataset import SequenceDataset
from seq2exp.data.onehot import OnehotDataset

__all__ = [
    "SequenceDataset",
    "OnehotDataset",
]
