"""
Example script for solving a hill-climbing height map.

This script demonstrates how to:
1. Parse a height map
2. Build the climb graph
3. Find the shortest paths in forward and reverse mode
"""

import os
import sys

# Add the parent directory to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from grapho_hills.processing import parse_height_map
from grapho_hills.pipeline import GraphBuilder, PathSolver, Pipeline

EXAMPLE = """
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
"""


def main():
    """Run the hill climbing example."""
    print("Grapho Hills - Example Script for Hill Climbing")
    print("-----------------------------------------------")

    print("\n1. Parsing the height map...")
    height_map = parse_height_map(EXAMPLE)
    print(f"Grid shape: {height_map.shape}, start={height_map.start}, end={height_map.end}")
    print(height_map.to_array())

    print("\n2. Building the climb graph...")
    climb_graph = GraphBuilder().create_climb_graph(height_map)
    print(climb_graph)

    print("\n3. Searching shortest paths...")
    solver = PathSolver()
    path = solver.forward_path(climb_graph)
    print(f"Forward distance: {solver.forward(climb_graph)}")
    print("Route: " + " -> ".join(str(c) for c in path))
    print(f"Reverse distance (from any lowest cell): {solver.reverse(climb_graph)}")

    print("\n4. Same result through the pipeline...")
    context = Pipeline.from_text(EXAMPLE).run()
    print(context['results'])

    print("\nExample completed successfully!")
    return context


if __name__ == "__main__":
    context = main()
