"""
Grid拓扑实现
多维网格：双向链的笛卡尔积
"""

from __future__ import annotations

from ..core.types import TopologyKind
from .base import TopologyFactory
from .composite import CompositeTopology
from .mesh import BMesh, mesh_diameter

class BGrid(CompositeTopology):
    """多维双向网格

    直径为 Σ(di - 1)，由规范化维度直接求得
    """

    topology_kind = TopologyKind.BGRID
    base_topology = BMesh

    @staticmethod
    def dimension_diameter(d: int) -> int:
        return mesh_diameter(d)

# 注册Grid拓扑
TopologyFactory.register(TopologyKind.BGRID, BGrid)
