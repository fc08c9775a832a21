import numpy as np
import pytest

from seq2exp.data import SequenceDataset
from seq2exp.exceptions import EmptyInputError, LengthMismatchError


def test_basic_dataset():
    strings = ["ATCG", "GGTA", "CCCC"]
    labels = [1.0, 2.0, 3.0]
    ds = SequenceDataset(strings, labels)

    assert list(ds.sequences) == strings
    np.testing.assert_array_equal(ds.labels, labels)
    assert ds.feature_names is None
    assert ds.consensus is None
    assert len(ds) == 3
    assert ds.sequence_length == 4


def test_dataset_with_feature_names():
    ds = SequenceDataset(["ATCG", "GGTA"], [[1.0, 2.0], [3.0, 4.0]], ["exp1", "exp2"])
    assert ds.get_feature_names() == ["exp1", "exp2"]
    assert ds.labels.shape == (2, 2)
    assert ds.feature_count == 2


def test_matrix_labels_have_one_column_per_sequence():
    labels = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    ds = SequenceDataset(["ATCG", "GGTA", "CCAC"], labels, ["exp1", "exp2"])
    assert ds.feature_count == 2


def test_vector_labels_count_as_one_feature():
    ds = SequenceDataset(["ATCG", "GGTA", "CCAC"], [1.2, 3.4, 4.1], ["expression"])
    assert ds.feature_count == 1


def test_dataset_with_consensus():
    ds = SequenceDataset(["ATCG", "ATCA", "ATGG"], [1.0, 2.0, 3.0], get_consensus=True)
    assert ds.has_consensus()
    assert ds.get_consensus() == "ATCG"


def test_missing_consensus():
    ds = SequenceDataset(["ATCG", "GGTA"], [1.0, 2.0])
    assert not ds.has_consensus()
    with pytest.raises(ValueError):
        ds.get_consensus()


def test_label_dtype_conversion():
    ds = SequenceDataset(["ATCG", "GGTA"], [1, 2], dtype=np.float32)
    assert ds.labels.dtype == np.float32


def test_get_sequence_and_labels():
    ds = SequenceDataset(["ATCG", "GGTA"], [1.0, 2.0])
    seqs, labs = ds.get_sequence_and_labels()
    assert seqs == ["ATCG", "GGTA"]
    np.testing.assert_array_equal(labs, [1.0, 2.0])


def test_unequal_sequence_lengths():
    with pytest.raises(LengthMismatchError):
        SequenceDataset(["AT", "ATCG"], [1.0, 2.0])


def test_empty_sequences():
    with pytest.raises(EmptyInputError):
        SequenceDataset([], [])


def test_label_count_mismatch():
    with pytest.raises(ValueError, match="must match"):
        SequenceDataset(["ATCG", "GGTA"], [1.0, 2.0, 3.0])


def test_labels_must_be_vector_or_matrix():
    with pytest.raises(ValueError):
        SequenceDataset(["ATCG", "GGTA"], np.zeros((1, 1, 2)))


def test_feature_name_count_mismatch():
    with pytest.raises(ValueError, match="feature names"):
        SequenceDataset(["ATCG", "GGTA"], [[1.0, 2.0], [3.0, 4.0]], ["exp1"])
    with pytest.raises(ValueError, match="feature names"):
        SequenceDataset(["ATCG", "GGTA"], [1.0, 2.0], ["exp1", "exp2"])
