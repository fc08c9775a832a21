"""Shared test fixtures for seq2exp tests."""

import pytest


@pytest.fixture
def dna_sequences():
    """Equal-length DNA sequences."""
    return ["ATCG", "GCTA", "TTAA"]


@pytest.fixture
def protein_sequences():
    """Equal-length protein sequences."""
    return ["ACDEFGHI", "KLMNPQRS"]


@pytest.fixture
def variant_sequences():
    """DNA variants that share a common prefix and suffix."""
    return ["AAATCGGG", "AAAGGTGG", "AAACCCGG"]


@pytest.fixture
def mutated_sequences():
    """Sequences with a few point mutations relative to "ATCG"."""
    return ["ATCG", "ATCA", "ATGG", "TTCG"]
