"""
Adapter for converting grid occupancy into NetworkX graphs.

Occupied cells become graph nodes and touching occupied cells are joined by
edges, which turns spatial clustering into connected-component search.
"""

import networkx as nx
from typing import Iterator, List, Tuple

from ..spatial.grid import GridSubdivision
from ..spatial.odometer import IndexRange

CONNECTIVITIES = ("face", "full")


def _neighbors(index: Tuple[int, ...], connectivity: str) -> Iterator[Tuple[int, ...]]:
    """Neighbouring cell coordinates of ``index`` (excluding itself)."""
    if connectivity == "face":
        for k in range(len(index)):
            for step in (-1, 1):
                yield index[:k] + (index[k] + step,) + index[k + 1:]
    else:
        block = IndexRange([i - 1 for i in index], [i + 1 for i in index])
        for neighbor in block:
            if neighbor != index:
                yield neighbor


def to_networkx_graph(grid: GridSubdivision, connectivity: str = "face") -> nx.Graph:
    """
    Convert the occupied cells of a grid to a NetworkX graph.

    The resulting graph is keyed by plain coordinate tuples and has node
    attributes:
    - 'count': int number of handles in the cell
    - 'items': list of the cell's handles
    - 'bounds_min', 'bounds_max': physical extent of the cell as lists

    Parameters
    ----------
    grid : GridSubdivision
        Grid to convert
    connectivity : {"face", "full"}
        "face" joins cells differing by one step on exactly one axis,
        "full" joins every cell in the surrounding 3^N block

    Returns
    -------
    G : nx.Graph
        Cell adjacency graph
    """
    if connectivity not in CONNECTIVITIES:
        raise ValueError(
            f"Unknown connectivity '{connectivity}'. Available: {', '.join(CONNECTIVITIES)}"
        )

    G = nx.Graph()

    for index, bucket in grid.iter_buckets():
        bounds = grid.index_bucket_bounds(index)
        G.add_node(
            index,
            count=len(bucket),
            items=bucket,
            bounds_min=bounds.bmin.tolist(),
            bounds_max=bounds.bmax.tolist(),
        )

    for index, _ in grid.iter_buckets():
        for neighbor in _neighbors(index, connectivity):
            if neighbor in grid:
                G.add_edge(index, neighbor)

    return G


def cluster_items(grid: GridSubdivision, connectivity: str = "face") -> List[list]:
    """
    Group handles by connected clusters of occupied cells.

    Parameters
    ----------
    grid : GridSubdivision
        Grid to cluster
    connectivity : {"face", "full"}
        Neighbourhood used to join cells, see ``to_networkx_graph``

    Returns
    -------
    clusters : list of list
        Handles of each cluster, largest cluster first
    """
    G = to_networkx_graph(grid, connectivity=connectivity)

    clusters = []
    for component in nx.connected_components(G):
        items = []
        for node in sorted(component):
            items.extend(G.nodes[node]["items"])
        clusters.append(items)

    clusters.sort(key=len, reverse=True)
    return clusters


def cluster_cells(grid: GridSubdivision, connectivity: str = "face") -> List[List[Tuple[int, ...]]]:
    """Cell coordinates of each occupied-cell cluster, largest first."""
    G = to_networkx_graph(grid, connectivity=connectivity)
    components = [sorted(c) for c in nx.connected_components(G)]
    components.sort(key=len, reverse=True)
    return components
