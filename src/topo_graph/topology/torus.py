"""
Torus拓扑实现
多维环面：双向环的笛卡尔积，每一维首尾环绕
"""

from __future__ import annotations

from ..core.types import TopologyKind
from .base import TopologyFactory
from .composite import CompositeTopology
from .ring import BRing, ring_diameter

class BTorus(CompositeTopology):
    """多维双向环面

    直径为 Σ floor(di / 2)，由规范化维度直接求得
    """

    topology_kind = TopologyKind.BTORUS
    base_topology = BRing

    @staticmethod
    def dimension_diameter(d: int) -> int:
        return ring_diameter(d)

# 注册Torus拓扑
TopologyFactory.register(TopologyKind.BTORUS, BTorus)
