"""
Shared fixtures for the grapho_hills tests.
"""

import random

import pytest

from grapho_hills.pipeline.graph_builder import GraphBuilder
from grapho_hills.processing.terrain import parse_height_map

CANONICAL_TEXT = """
    Sabqponm
    abcryxxl
    accszExk
    acctuvwj
    abdefghi
    """


def random_grid_text(seed, n_rows=6, n_cols=7, letters="abcdefgh"):
    """Random rectangular grid with one start and one end marker."""
    rng = random.Random(seed)
    rows = [[rng.choice(letters) for _ in range(n_cols)] for _ in range(n_rows)]
    cells = [(r, c) for r in range(n_rows) for c in range(n_cols)]
    (s_row, s_col), (e_row, e_col) = rng.sample(cells, 2)
    rows[s_row][s_col] = 'S'
    rows[e_row][e_col] = 'E'
    return "\n".join("".join(row) for row in rows)


@pytest.fixture
def canonical_text():
    return CANONICAL_TEXT


@pytest.fixture
def canonical_map():
    return parse_height_map(CANONICAL_TEXT)


@pytest.fixture
def canonical_graph(canonical_map):
    return GraphBuilder().create_climb_graph(canonical_map)
