"""
Map between node identifiers and matrix indices, and between heights and
coordinates.

Index assignment: scan the edge list once; each edge contributes its source
then its target, and an identifier gets the next free index the first time it
is seen. That order is also the output order of trophic_layout().

The core layer never sees identifiers, only indices.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Iterator, Mapping, Sequence
import logging

import numpy as np

from trophic.core.levels import FailureKind, TrophicConfig, compute_trophic_levels
from trophic.core.matrix import zero

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """A directed edge between two node identifiers."""

    source: Hashable
    target: Hashable


def as_edge(item: Any) -> Edge:
    """
    Coerce an edge record.

    Accepts an Edge, a mapping with "from"/"to" keys, or a (from, to) pair.
    """
    if isinstance(item, Edge):
        return item
    if isinstance(item, Mapping):
        return Edge(item["from"], item["to"])
    if not isinstance(item, (tuple, list)):
        raise TypeError(f"Cannot read an edge from {type(item).__name__}: {item!r}")
    source, target = item
    return Edge(source, target)


class NodeIndex:
    """Ordered bijection between node identifiers and indices 0..n-1."""

    def __init__(self, ids: Iterable[Hashable] = ()):
        self._ids: list[Hashable] = []
        self._index: dict[Hashable, int] = {}
        for node_id in ids:
            self.add(node_id)

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> NodeIndex:
        index = cls()
        for edge in edges:
            index.add(edge.source)
            index.add(edge.target)
        return index

    def add(self, node_id: Hashable) -> int:
        """Return the index of node_id, assigning the next one if unseen."""
        if node_id not in self._index:
            self._index[node_id] = len(self._ids)
            self._ids.append(node_id)
        return self._index[node_id]

    def index(self, node_id: Hashable) -> int:
        return self._index[node_id]

    def node_id(self, index: int) -> Hashable:
        return self._ids[index]

    @property
    def ids(self) -> list[Hashable]:
        return list(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._ids)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index


def edge_list_to_adjacency(
    edges: Iterable[Any],
) -> tuple[np.ndarray, NodeIndex]:
    """
    Convert an edge list into an adjacency matrix.

    Repeated edges set the same cell to 1 again; there is no weight
    accumulation.

    Args:
        edges: Edge records (see as_edge)

    Returns:
        (adjacency, node_index)
    """
    edge_list = [as_edge(e) for e in edges]
    node_index = NodeIndex.from_edges(edge_list)

    a = zero(len(node_index))
    for edge in edge_list:
        a[node_index.index(edge.source), node_index.index(edge.target)] = 1
    return a, node_index


def rescale(heights: np.ndarray, coords: Sequence[float]) -> np.ndarray:
    """
    Map heights linearly into the range spanned by coords.

    new = h * (max(coords) - min(coords)) / (max(h) - min(h)) + min(coords)

    This is a global remap of the height range, not a matching of the
    extremal nodes. If all heights are equal every node lands on min(coords).
    """
    h = np.asarray(heights, dtype=np.float64)
    x = np.asarray(coords, dtype=np.float64)
    min_x, max_x = x.min(), x.max()

    span = h.max() - h.min()
    if span == 0:
        return np.full_like(h, min_x)

    scale = (max_x - min_x) / span
    return h * scale + min_x


@dataclass
class LayoutConfig:
    """Configuration for trophic_layout()."""

    axis: str = "x"   # Coordinate field overwritten with the height
    id_key: str = "id"  # Identifier field of node records
    trophic: TrophicConfig = field(default_factory=TrophicConfig)

    def __post_init__(self):
        if not self.axis:
            raise ValueError("axis must name a coordinate field")
        if not self.id_key:
            raise ValueError("id_key must name an identifier field")


@dataclass
class LayoutResult:
    """Outcome of trophic_layout()."""

    nodes: list[dict] | None
    heights: np.ndarray | None = None
    node_ids: list[Hashable] = field(default_factory=list)
    failure: FailureKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None


def _index_nodes(
    nodes: Sequence[Mapping] | Mapping[Hashable, Mapping],
    id_key: str,
) -> dict[Hashable, Mapping]:
    if isinstance(nodes, Mapping):
        return dict(nodes)
    by_id = {}
    for node in nodes:
        node_id = node[id_key]
        if node_id in by_id:
            raise ValueError(f"Duplicate node id: {node_id!r}")
        by_id[node_id] = node
    return by_id


def trophic_layout(
    edges: Iterable[Any],
    nodes: Sequence[Mapping] | Mapping[Hashable, Mapping],
    config: LayoutConfig | None = None,
) -> LayoutResult:
    """
    Move nodes along one axis to their trophic heights.

    The heights are rescaled into the range the nodes currently occupy on
    config.axis.

    Args:
        edges: Directed edges (Edge, {"from", "to"} mappings, or pairs)
        nodes: Node records with an identifier and a numeric coordinate,
            either a sequence or a mapping id → record
        config: Layout options (defaults if None)

    Returns:
        LayoutResult with copies of the node records in index order, or a
        failure passed through from the core
    """
    if config is None:
        config = LayoutConfig()

    by_id = _index_nodes(nodes, config.id_key)
    adjacency, node_index = edge_list_to_adjacency(edges)

    missing = [node_id for node_id in node_index if node_id not in by_id]
    if missing:
        raise ValueError(f"Edges reference unknown nodes: {missing}")

    result = compute_trophic_levels(adjacency, config.trophic)
    if not result.ok:
        return LayoutResult(
            nodes=None,
            node_ids=node_index.ids,
            failure=result.failure,
            message=result.message,
        )

    coords = [float(node[config.axis]) for node in by_id.values()]
    positions = rescale(result.heights, coords)

    moved = []
    for i, node_id in enumerate(node_index):
        node = dict(by_id[node_id])
        node[config.axis] = float(positions[i])
        moved.append(node)

    logger.debug("Laid out %d nodes on axis %r", len(moved), config.axis)
    return LayoutResult(
        nodes=moved,
        heights=result.heights,
        node_ids=node_index.ids,
    )
