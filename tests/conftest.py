import matplotlib

matplotlib.use("Agg")

import pytest

from NWAlign.seq_alignment import ScoringScheme


def naive_scores(seq_a, seq_b, scheme):
    """Score grid straight from the recurrence, as nested lists"""
    rows, cols = len(seq_a) + 1, len(seq_b) + 1
    grid = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        grid[i][0] = i * scheme.indel_cost
    for j in range(cols):
        grid[0][j] = j * scheme.indel_cost
    for i in range(1, rows):
        for j in range(1, cols):
            sub = scheme.match_score if seq_a[i - 1] == seq_b[j - 1] else scheme.mismatch_score
            grid[i][j] = max(
                grid[i - 1][j - 1] + sub,
                grid[i - 1][j] + scheme.indel_cost,
                grid[i][j - 1] + scheme.indel_cost,
            )
    return grid


@pytest.fixture
def unit_scheme():
    return ScoringScheme(1, -1, -1)


@pytest.fixture
def demo_scheme():
    return ScoringScheme(2, -1, -2)


@pytest.fixture
def recurrence():
    return naive_scores
