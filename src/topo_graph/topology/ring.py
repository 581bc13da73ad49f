"""
环拓扑实现
单向环与双向环，顶点 0..N-1，N>1 时首尾相连
"""

from __future__ import annotations

from typing import List, Tuple

from ..core.types import TopologyKind
from .base import SizedTopology, TopologyFactory

def ring_diameter(n: int) -> int:
    """环的闭式直径: N<=1 为0，否则 floor(N/2)"""
    return 0 if n <= 1 else n // 2

def _ring_successors(n: int) -> List[Tuple[int, int]]:
    if n <= 1:
        return []
    return [(i, (i + 1) % n) for i in range(n)]

class URing(SizedTopology):
    """单向环: i → (i+1) mod N"""

    topology_kind = TopologyKind.URING

    @staticmethod
    def edge_pattern(n: int) -> List[Tuple[int, int]]:
        return _ring_successors(n)

    def _closed_form_diameter(self) -> int:
        return ring_diameter(self._size)

class BRing(SizedTopology):
    """双向环: 单向环的每条边都加上反向边

    N=2 时产生两对平行边，边数仍为单向环的两倍
    """

    topology_kind = TopologyKind.BRING

    @staticmethod
    def edge_pattern(n: int) -> List[Tuple[int, int]]:
        pattern = []
        for source, target in _ring_successors(n):
            pattern.append((source, target))
            pattern.append((target, source))
        return pattern

    def _closed_form_diameter(self) -> int:
        return ring_diameter(self._size)

# 注册环拓扑
TopologyFactory.register(TopologyKind.URING, URing)
TopologyFactory.register(TopologyKind.BRING, BRing)
