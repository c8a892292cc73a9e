"""Graph views over generated grids for connectivity and path queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence, TypeAlias

import networkx as nx

from .geometry import HEX_DIRECTIONS, Hex, hex_add
from .grid import GridKey, HexGrid, grid_key

if TYPE_CHECKING:  # pragma: no cover - typing only
    GridGraph: TypeAlias = nx.Graph[GridKey]
else:  # pragma: no cover - runtime alias without subscripting
    GridGraph: TypeAlias = nx.Graph


def grid_graph(grid: HexGrid) -> GridGraph:
    """Return an undirected graph joining neighbouring hexes of ``grid``.

    Nodes are grid keys carrying ``coordinates`` and ``distance``
    attributes. Each edge records the direction index (0..2) leading from
    one endpoint to the other; the opposite direction is ``index + 3``.
    """

    graph: GridGraph = nx.Graph()
    for key, entry in grid.items():
        graph.add_node(key, coordinates=entry.coordinates, distance=entry.distance)

    for key, entry in grid.items():
        # Directions 3..5 are the reverses of 0..2, so three suffice.
        for index, direction in enumerate(HEX_DIRECTIONS[:3]):
            neighbour = grid_key(hex_add(entry.coordinates, direction))
            if neighbour in grid:
                graph.add_edge(key, neighbour, direction=index)
    return graph


def grid_path(graph: GridGraph, start: Hex, goal: Hex) -> Sequence[Hex]:
    """Return the hexes on a shortest path from ``start`` to ``goal``.

    Raises ``networkx.NodeNotFound`` or ``networkx.NetworkXNoPath`` when
    either end is missing or the two are disconnected.
    """

    keys = nx.shortest_path(graph, grid_key(start), grid_key(goal))
    return [graph.nodes[key]["coordinates"] for key in keys]


__all__ = ["GridGraph", "grid_graph", "grid_path"]
