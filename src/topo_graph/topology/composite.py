"""
复合拓扑基类
对规范化维度序列做左结合笛卡尔积折叠，网格与环面共用
"""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar, Iterable, Sequence, Tuple, Type

from ..core.types import TopologyKind
from ..utils.functional import fold_left, product_of
from ..utils.logging import get_logger
from .base import Graph, SizedTopology, SpecializedTopology
from .dimensions import DimensionsView, canonicalize_dimensions, format_dimensions, is_degenerate
from .point import OPG
from .product import gproduct, product_edge_count

logger = get_logger(__name__)

class CompositeTopology(SpecializedTopology):
    """多维复合拓扑

    规范化维度 [d1, ..., dk] 决定名称、顶点数、边数与直径：
    - [1]: 单点图，名称 "<Kind>[]"
    - [d1]: 对应基础拓扑，名称 "<Kind>[d1]"
    - k >= 2: base(d1) ⊗ base(d2) ⊗ ... ⊗ base(dk)，名称 "<Kind>[d1,...,dk]"
    """

    topology_kind: ClassVar[TopologyKind]
    base_topology: ClassVar[Type[SizedTopology]]

    def __init__(self, dimensions: Iterable[int] = (), frozen: bool = False):
        canonical = canonicalize_dimensions(dimensions)
        super().__init__(self.topology_kind, canonical)
        self._expected_vertices, self._expected_edges = self.closed_form_counts(canonical)
        self._adopt(self._fold(canonical))
        self._finish(frozen)
        logger.debug(
            "composite_built",
            kind=self.topology_kind.value,
            dimensions=list(canonical),
            vertices=self._expected_vertices,
            edges=self._expected_edges,
        )

    def _display_name(self) -> str:
        return f"{self.topology_kind.value}[{format_dimensions(self._construction_dimensions)}]"

    @classmethod
    def _fold(cls, canonical: Tuple[int, ...]) -> Graph:
        if is_degenerate(canonical):
            return OPG()
        head, *tail = canonical
        return fold_left(
            lambda acc, d: gproduct(acc, cls.base_topology(d)),
            tail,
            cls.base_topology(head),
        )

    @classmethod
    def closed_form_counts(cls, canonical: Sequence[int]) -> Tuple[int, int]:
        """按积图边数公式迭代计算 (顶点数, 边数)，从单点图 (1, 0) 开始"""
        if is_degenerate(canonical):
            return 1, 0
        vertices, edges = 1, 0
        for d in canonical:
            factor_edges = len(cls.base_topology.edge_pattern(d))
            edges = product_edge_count(vertices, edges, d, factor_edges)
            vertices *= d
        return vertices, edges

    @staticmethod
    @abstractmethod
    def dimension_diameter(d: int) -> int:
        """单个维度对直径的贡献 - 子类必须实现"""
        pass

    @property
    def dimensions(self) -> DimensionsView:
        """规范化维度；转为通用图后保留构造时的值"""
        return DimensionsView(self._construction_dimensions)

    @property
    def num_vertices(self) -> int:
        if self.is_specialized:
            return self._expected_vertices
        return super().num_vertices

    @property
    def num_edges(self) -> int:
        if self.is_specialized:
            return self._expected_edges
        return super().num_edges

    def _closed_form_diameter(self) -> int:
        return sum(self.dimension_diameter(d) for d in self._construction_dimensions)

    @classmethod
    def from_dimensions(cls, dimensions: Sequence[int], frozen: bool = False) -> CompositeTopology:
        return cls(dimensions, frozen=frozen)

def expected_vertex_count(dimensions: Iterable[int]) -> int:
    """规范化后的顶点数 Π di"""
    return product_of(canonicalize_dimensions(dimensions))
