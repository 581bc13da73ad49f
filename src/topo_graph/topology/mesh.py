"""
链拓扑实现
单向链与双向链（一维无环绕网格）
"""

from __future__ import annotations

from typing import List, Tuple

from ..core.types import TopologyKind
from .base import SizedTopology, TopologyFactory

def mesh_diameter(n: int) -> int:
    """链的闭式直径: N<=1 为0，否则 N-1"""
    return 0 if n <= 1 else n - 1

class UMesh(SizedTopology):
    """单向链: i → i+1, i ∈ [0, N-2]"""

    topology_kind = TopologyKind.UMESH

    @staticmethod
    def edge_pattern(n: int) -> List[Tuple[int, int]]:
        return [(i, i + 1) for i in range(n - 1)]

    def _closed_form_diameter(self) -> int:
        return mesh_diameter(self._size)

class BMesh(SizedTopology):
    """双向链: 相邻顶点双向连接"""

    topology_kind = TopologyKind.BMESH

    @staticmethod
    def edge_pattern(n: int) -> List[Tuple[int, int]]:
        pattern = []
        for i in range(n - 1):
            pattern.append((i, i + 1))
            pattern.append((i + 1, i))
        return pattern

    def _closed_form_diameter(self) -> int:
        return mesh_diameter(self._size)

# 注册链拓扑
TopologyFactory.register(TopologyKind.UMESH, UMesh)
TopologyFactory.register(TopologyKind.BMESH, BMesh)
