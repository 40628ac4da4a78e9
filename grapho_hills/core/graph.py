"""
Graph data structures for height maps.

This module provides the directed climb graph derived from a height map.
Nodes are grid coordinates; an edge A -> B means one step from A to B is
allowed by the climb rule.
"""

import networkx as nx
import pandas as pd
from typing import Set, Tuple

from .data_model import Coordinate

__all__ = ['ClimbGraph']


class ClimbGraph:
    """
    A frozen directed graph over the cells of a height map.
    """

    def __init__(self, graph, height_map, is_reversed=False):
        """
        Initialize a ClimbGraph.

        Parameters
        ----------
        graph : networkx.DiGraph
            Directed graph whose nodes are Coordinates, each carrying
            'elevation' and 'role' attributes
        height_map : HeightMap
            Height map the graph was derived from
        is_reversed : bool, optional
            Whether edges point against the climb direction
        """
        self.graph = graph
        self.height_map = height_map
        self.is_reversed = is_reversed

    @property
    def start(self) -> Coordinate:
        return self.height_map.start

    @property
    def end(self) -> Coordinate:
        return self.height_map.end

    def reversed(self):
        """
        Get the graph with every edge direction flipped.

        The result wraps a read-only view of this graph; neither graph is
        modified.

        Returns
        -------
        ClimbGraph
            Reversed graph over the same nodes
        """
        return ClimbGraph(
            self.graph.reverse(copy=False),
            self.height_map,
            is_reversed=not self.is_reversed,
        )

    def number_of_nodes(self):
        return self.graph.number_of_nodes()

    def number_of_edges(self):
        return self.graph.number_of_edges()

    def edge_set(self) -> Set[Tuple[Coordinate, Coordinate]]:
        return set(self.graph.edges())

    def elevation(self, node):
        return self.graph.nodes[node]['elevation']

    def successors(self, node):
        return self.graph.successors(node)

    def to_edgelist(self):
        """
        Convert the edges to a DataFrame.

        Returns
        -------
        DataFrame
            One row per edge with 'source', 'target', 'source_elevation'
            and 'target_elevation' columns
        """
        edges = nx.to_pandas_edgelist(self.graph)
        if edges.empty:
            return pd.DataFrame(columns=['source', 'target', 'source_elevation', 'target_elevation'])

        edges = edges[['source', 'target']].copy()
        edges['source_elevation'] = [self.elevation(n) for n in edges['source']]
        edges['target_elevation'] = [self.elevation(n) for n in edges['target']]
        return edges

    def __repr__(self):
        direction = "reversed" if self.is_reversed else "forward"
        return (f"ClimbGraph({direction}, nodes={self.number_of_nodes()}, "
                f"edges={self.number_of_edges()})")
