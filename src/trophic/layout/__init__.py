"""
Layout layer: node identifiers and coordinates.

- Edge / NodeIndex: edge records and first-seen index assignment
- edge_list_to_adjacency: build the matrix the core works on
- rescale: map heights into a coordinate range
- trophic_layout: the full edge list → positioned nodes pipeline
"""

from trophic.layout.coordinates import (
    Edge,
    as_edge,
    NodeIndex,
    edge_list_to_adjacency,
    rescale,
    LayoutConfig,
    LayoutResult,
    trophic_layout,
)

__all__ = [
    "Edge",
    "as_edge",
    "NodeIndex",
    "edge_list_to_adjacency",
    "rescale",
    "LayoutConfig",
    "LayoutResult",
    "trophic_layout",
]
