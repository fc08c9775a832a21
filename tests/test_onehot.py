import numpy as np
import pytest

from seq2exp.data import OnehotDataset, SequenceDataset
from seq2exp.exceptions import UnrecognizedAlphabetError


def test_onehot_dataset():
    labels = [1.0, 2.0]
    ds = SequenceDataset(["ATCG", "GGTA"], labels)
    ods = OnehotDataset(ds)

    assert ods.raw_data is ds
    assert ods.onehot_sequences.shape == (4, 4, 1, 2)
    assert ods.onehot_sequences.dtype == np.float64
    np.testing.assert_array_equal(ods.get_label(), labels)
    assert ods.get_label_names() is None
    assert ods.get_prefix_offset() == 0
    assert ods.get_x_dim() == (4, 4)
    assert ods.get_y_dim() == 1


def test_x_and_y_accessors():
    ds = SequenceDataset(["ATCG", "GGTA"], [1.0, 2.0])
    ods = OnehotDataset(ds)
    assert ods.X is ods.onehot_sequences
    assert ods.Y is ds.labels
    X, Y = ods.get_xy()
    assert X is ods.get_x()
    assert Y is ods.get_y()
    assert ods.get_onehot() is X


def test_trimming_shrinks_tensor(variant_sequences):
    ds = SequenceDataset(variant_sequences, [1.0, 2.0, 3.0])
    ods = OnehotDataset(ds)
    assert ods.prefix_offset == 3
    assert ods.X.shape == (4, 3, 1, 3)
    assert ods.x_dim == (4, 3)

    untrimmed = OnehotDataset(ds, trim=False)
    assert untrimmed.prefix_offset == 0
    assert untrimmed.X.shape == (4, 8, 1, 3)


def test_amino_acid_dataset(protein_sequences):
    ds = SequenceDataset(protein_sequences, [[0.1, 0.2], [0.3, 0.4]], ["a", "b"])
    ods = OnehotDataset(ds, trim=False)
    assert ods.x_dim == (20, 8)
    assert ods.y_dim == 2
    assert ods.get_label_names() == ["a", "b"]


def test_integer_labels_default_to_float32():
    ds = SequenceDataset(["ATCG", "GGTA"], [1, 2])
    assert OnehotDataset(ds).X.dtype == np.float32
    assert OnehotDataset(ds, dtype=np.float64).X.dtype == np.float64


def test_tensors_are_read_only():
    ds = SequenceDataset(["ATCG", "GGTA"], [1.0, 2.0])
    ods = OnehotDataset(ds)
    with pytest.raises(ValueError):
        ods.X[0, 0, 0, 0] = 5.0


def test_mutation_tensor(mutated_sequences):
    ds = SequenceDataset(mutated_sequences, [1.0, 2.0, 3.0, 4.0], get_consensus=True)
    ods = OnehotDataset(ds, trim=False)
    assert ods.X_mut.shape == ods.X.shape
    assert ods.get_mutations().sum() == 3
    assert ods.X_mut.sum() < ods.X.sum()


def test_mutation_tensor_follows_trimming(variant_sequences):
    ds = SequenceDataset(variant_sequences, [1.0, 2.0, 3.0], get_consensus=True)
    ods = OnehotDataset(ds)
    assert ods.X_mut.shape == (4, 3, 1, 3)
    # CCC is the consensus core
    assert ods.X_mut[:, :, 0, 2].sum() == 0
    assert ods.X_mut[:, :, 0, 1].sum() == 3


def test_no_mutation_tensor_without_consensus():
    ds = SequenceDataset(["ATCG", "GGTA"], [1.0, 2.0])
    ods = OnehotDataset(ds)
    assert ods.X_mut is None
    with pytest.raises(ValueError):
        ods.get_mutations()


def test_single_sequence_dataset():
    ds = SequenceDataset(["ACGT"], [1.0], get_consensus=True)
    ods = OnehotDataset(ds)
    assert ods.prefix_offset == 4
    assert ods.X.shape == (4, 0, 1, 1)
    assert ods.X_mut.shape == (4, 0, 1, 1)


def test_unrecognized_alphabet_fails_construction():
    ds = SequenceDataset(["AXZQ", "AXZR"], [1.0, 2.0])
    with pytest.raises(UnrecognizedAlphabetError):
        OnehotDataset(ds, trim=False)


def test_dtype_follows_label_dtype():
    ds = SequenceDataset(["ATCG", "GGTA"], [1, 2], ["expression"], dtype=np.float32)
    ods = OnehotDataset(ds)
    assert ods.X.dtype == np.float32
    assert isinstance(ods.get_label_names(), list)
