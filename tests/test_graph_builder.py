import networkx as nx
import pytest

from grapho_hills.core.data_model import CellRole, Coordinate, HeightMap, translate_symbol
from grapho_hills.pipeline.graph_builder import GraphBuilder
from grapho_hills.pipeline.paths import PathSolver
from grapho_hills.processing.terrain import parse_height_map

from conftest import random_grid_text


def brute_force_edges(height_map, max_climb=1):
    """Every ordered 4-neighbour pair allowed by the climb rule."""
    edges = set()
    for a in height_map:
        if a == height_map.end:
            continue
        for b in height_map:
            if abs(a.row - b.row) + abs(a.col - b.col) != 1:
                continue
            if height_map.elevation(b) <= height_map.elevation(a) + max_climb:
                edges.add((a, b))
    return edges


def test_one_node_per_cell(canonical_map, canonical_graph):
    assert canonical_graph.number_of_nodes() == len(canonical_map)
    assert set(canonical_graph.graph.nodes) == set(canonical_map)


def test_node_attributes(canonical_graph):
    attrs = canonical_graph.graph.nodes[canonical_graph.end]
    assert attrs['elevation'] == 25
    assert attrs['role'] is CellRole.END


def test_canonical_edges_match_brute_force(canonical_map, canonical_graph):
    assert canonical_graph.edge_set() == brute_force_edges(canonical_map)


@pytest.mark.parametrize("seed", range(8))
def test_random_edges_match_brute_force(seed):
    height_map = parse_height_map(random_grid_text(seed))
    climb_graph = GraphBuilder().create_climb_graph(height_map)
    assert climb_graph.edge_set() == brute_force_edges(height_map)


@pytest.mark.parametrize("max_climb", [0, 2, 25])
def test_max_climb(canonical_map, max_climb):
    climb_graph = GraphBuilder().create_climb_graph(canonical_map, max_climb=max_climb)
    assert climb_graph.edge_set() == brute_force_edges(canonical_map, max_climb)


def test_end_has_no_outgoing_edges(canonical_graph):
    assert list(canonical_graph.successors(canonical_graph.end)) == []
    assert canonical_graph.graph.in_degree(canonical_graph.end) > 0


def test_extra_end_cell_keeps_outgoing_edges():
    # A map built by hand may carry more than one END cell; only the designated
    # end is a sink, the others are crossed like any elevation-25 cell.
    row = "S" + "bcdefghijklmnopqrstuvwxy" + "EE"
    heights = {Coordinate(0, col): translate_symbol(symbol) for col, symbol in enumerate(row)}
    extra_end = Coordinate(0, len(row) - 2)
    height_map = HeightMap(heights, Coordinate(0, 0), Coordinate(0, len(row) - 1))
    assert height_map.role(extra_end) is CellRole.END

    climb_graph = GraphBuilder().create_climb_graph(height_map)
    assert set(climb_graph.successors(extra_end)) == {Coordinate(0, len(row) - 3), height_map.end}
    assert list(climb_graph.successors(height_map.end)) == []
    assert climb_graph.edge_set() == brute_force_edges(height_map)
    assert PathSolver().forward(climb_graph) == len(row) - 1


def test_descending_is_always_allowed():
    climb_graph = GraphBuilder().create_climb_graph(parse_height_map("SzE"))
    assert (Coordinate(0, 1), Coordinate(0, 0)) in climb_graph.edge_set()
    assert (Coordinate(0, 0), Coordinate(0, 1)) not in climb_graph.edge_set()


def test_neighbors_stay_in_bounds(canonical_map):
    builder = GraphBuilder()
    assert set(builder.neighbors(canonical_map, Coordinate(0, 0))) == {
        Coordinate(1, 0), Coordinate(0, 1)
    }
    assert len(list(builder.neighbors(canonical_map, Coordinate(2, 3)))) == 4


def test_edge_set_independent_of_direction_order(canonical_map):
    default = GraphBuilder().create_climb_graph(canonical_map)
    shuffled = GraphBuilder(directions=((0, 1), (1, 0), (0, -1), (-1, 0))).create_climb_graph(canonical_map)
    assert default.edge_set() == shuffled.edge_set()


def test_graph_is_frozen(canonical_graph):
    assert nx.is_frozen(canonical_graph.graph)
    with pytest.raises(nx.NetworkXError):
        canonical_graph.graph.add_edge(Coordinate(0, 0), Coordinate(4, 7))


def test_reverse_flips_every_edge(canonical_graph):
    reversed_graph = canonical_graph.reversed()
    assert reversed_graph.is_reversed
    assert reversed_graph.edge_set() == {(b, a) for a, b in canonical_graph.edge_set()}
    assert reversed_graph.number_of_nodes() == canonical_graph.number_of_nodes()


def test_reverse_of_reverse_is_identity(canonical_graph):
    twice = canonical_graph.reversed().reversed()
    assert not twice.is_reversed
    assert twice.edge_set() == canonical_graph.edge_set()


def test_reverse_does_not_mutate_original(canonical_graph):
    before = canonical_graph.edge_set()
    canonical_graph.reversed()
    assert canonical_graph.edge_set() == before
    assert not canonical_graph.is_reversed


def test_to_edgelist(canonical_graph):
    edges = canonical_graph.to_edgelist()
    assert list(edges.columns) == ['source', 'target', 'source_elevation', 'target_elevation']
    assert len(edges) == canonical_graph.number_of_edges()
    assert (edges['target_elevation'] <= edges['source_elevation'] + 1).all()


def test_to_edgelist_without_edges():
    climb_graph = GraphBuilder().create_climb_graph(parse_height_map("SE"))
    edges = climb_graph.to_edgelist()
    assert edges.empty
    assert 'source_elevation' in edges.columns
