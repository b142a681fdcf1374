import pytest

from NWAlign.utils import random_sequence, DNA_ALPHABET


def test_length_and_alphabet():
    seq = random_sequence(200, seed=3)
    assert len(seq) == 200
    assert set(seq) <= set(DNA_ALPHABET)


def test_seed_reproducible():
    assert random_sequence(50, seed=11) == random_sequence(50, seed=11)


def test_custom_alphabet():
    assert set(random_sequence(30, alphabet="XY", seed=0)) <= {"X", "Y"}


def test_zero_length():
    assert random_sequence(0) == ""


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        random_sequence(-1)


def test_empty_alphabet_rejected():
    with pytest.raises(ValueError):
        random_sequence(5, alphabet="")
