"""
拓扑模块初始化
导出图模型、拓扑生成器、维度工具与笛卡尔积
"""

from .base import (
    Graph, EdgeRecord, SpecializedTopology, SizedTopology, TopologyFactory
)

from .diameter import bfs_distances, eccentricities, compute_diameter

from .dimensions import (
    DimensionsView, canonicalize_dimensions, validate_size, format_dimensions
)

from .ring import URing, BRing, ring_diameter
from .mesh import UMesh, BMesh, mesh_diameter
from .point import OPG

from .product import (
    gproduct, encode_vertex_id, product_vertex_count, product_edge_count
)

from .composite import CompositeTopology, expected_vertex_count
from .grid import BGrid
from .torus import BTorus

__all__ = [
    # 图模型
    'Graph', 'EdgeRecord', 'SpecializedTopology', 'SizedTopology', 'TopologyFactory',

    # 直径
    'bfs_distances', 'eccentricities', 'compute_diameter',

    # 维度
    'DimensionsView', 'canonicalize_dimensions', 'validate_size', 'format_dimensions',

    # 基础拓扑
    'URing', 'BRing', 'ring_diameter',
    'UMesh', 'BMesh', 'mesh_diameter',
    'OPG',

    # 笛卡尔积
    'gproduct', 'encode_vertex_id', 'product_vertex_count', 'product_edge_count',

    # 复合拓扑
    'CompositeTopology', 'expected_vertex_count', 'BGrid', 'BTorus'
]
