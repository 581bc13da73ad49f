"""
Topology Graph Package

Build and analyse interconnection-network topologies: rings, chains,
multidimensional grids and tori, and their Cartesian products.
"""

__version__ = "0.1.0"
__author__ = "Network Analyze Tool"

# Import main components for easy access
from .core.types import TopologyKind, EdgeProperties, TopologyShape, TopologyStats
from .core.errors import (
    TopologyError, InvalidArgumentError, OutOfRangeError, ImmutableTopologyError
)
from .topology import (
    Graph, URing, BRing, UMesh, BMesh, OPG, BGrid, BTorus,
    DimensionsView, TopologyFactory, canonicalize_dimensions, gproduct
)

__all__ = [
    "TopologyKind",
    "EdgeProperties",
    "TopologyShape",
    "TopologyStats",
    "TopologyError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "ImmutableTopologyError",
    "Graph",
    "URing",
    "BRing",
    "UMesh",
    "BMesh",
    "OPG",
    "BGrid",
    "BTorus",
    "DimensionsView",
    "TopologyFactory",
    "canonicalize_dimensions",
    "gproduct",
]
