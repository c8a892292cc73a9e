import networkx as nx
import pytest

from hexlattice.geometry import TRIANGLE_UP, Hex, hex_distance
from hexlattice.graph import grid_graph, grid_path
from hexlattice.grid import generate_hexagon_grid, generate_triangle_grid


def test_graph_of_small_hexagon():
    graph = grid_graph(generate_hexagon_grid(1))
    assert graph.number_of_nodes() == 7
    assert graph.number_of_edges() == 12
    assert graph.degree[(0, 0, 0)] == 6
    assert graph.nodes[(1, 0, -1)]["distance"] == 1
    assert graph.nodes[(1, 0, -1)]["coordinates"] == Hex(1, 0, -1)
    assert graph.edges[(0, 0, 0), (1, 0, -1)]["direction"] == 0


@pytest.mark.parametrize(
    ("start", "goal"),
    [(Hex(-3, 0, 3), Hex(3, 0, -3)), (Hex(0, -3, 3), Hex(1, 2, -3)), (Hex(2, 1, -3), Hex(2, 1, -3))],
)
def test_path_length_matches_hex_distance(start, goal):
    graph = grid_graph(generate_hexagon_grid(3))
    path = grid_path(graph, start, goal)
    assert path[0] == start and path[-1] == goal
    assert len(path) == hex_distance(start, goal) + 1
    for a, b in zip(path, path[1:]):
        assert hex_distance(a, b) == 1


def test_path_outside_grid():
    graph = grid_graph(generate_triangle_grid(2, TRIANGLE_UP))
    with pytest.raises(nx.NodeNotFound):
        grid_path(graph, Hex(0, 0, 0), Hex(0, -1, 1))
