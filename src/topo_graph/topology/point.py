"""单点图：仅含顶点0，无边，直径恒为0"""

from __future__ import annotations

from typing import Sequence

from ..core.errors import InvalidArgumentError
from ..core.types import TopologyKind
from .base import SpecializedTopology, TopologyFactory
from .dimensions import DEGENERATE_DIMENSIONS, is_degenerate

class OPG(SpecializedTopology):
    """单点图，笛卡尔积的单位元"""

    def __init__(self, frozen: bool = False):
        super().__init__(TopologyKind.OPG, DEGENERATE_DIMENSIONS)
        self._insert_vertex(0)
        self._finish(frozen)

    @property
    def dimension(self) -> int:
        return 1

    def _closed_form_diameter(self) -> int:
        return 0

    @classmethod
    def from_dimensions(cls, dimensions: Sequence[int], frozen: bool = False) -> OPG:
        if dimensions and not is_degenerate(dimensions):
            raise InvalidArgumentError(f"OPG 不接受尺寸参数: {list(dimensions)}")
        return cls(frozen=frozen)

TopologyFactory.register(TopologyKind.OPG, OPG)
