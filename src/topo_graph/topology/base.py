"""
图模型与专用拓扑基类
定义有向多重图容器、结构修改策略和拓扑工厂
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional, Sequence, Tuple

from ..core.errors import ImmutableTopologyError, InvalidArgumentError
from ..core.types import (
    DEFAULT_EDGE_PROPERTIES, GENERIC_NAME, EdgeEndpoints, EdgeProperties,
    TopologyKind, TopologyShape, TopologyStats, VERTEX_ID_MAX, VERTEX_ID_MIN, VertexId
)
from ..utils.logging import get_logger, graph_context
from .diameter import compute_diameter, eccentricities
from .dimensions import validate_size

logger = get_logger(__name__)

def validate_vertex_id(vertex_id: int) -> int:
    """顶点 id 必须是 32 位有符号整数"""
    if isinstance(vertex_id, bool) or not isinstance(vertex_id, int):
        raise InvalidArgumentError(f"顶点 id 必须为整数: {vertex_id!r}")
    if not VERTEX_ID_MIN <= vertex_id <= VERTEX_ID_MAX:
        raise InvalidArgumentError(
            f"顶点 id {vertex_id} 超出 32 位有符号整数范围 [{VERTEX_ID_MIN}, {VERTEX_ID_MAX}]"
        )
    return vertex_id

@dataclass(frozen=True)
class EdgeRecord:
    """边存储记录，端点为内部顶点下标"""
    source: int
    target: int
    properties: EdgeProperties = DEFAULT_EDGE_PROPERTIES

class Graph:
    """有向多重图

    顶点携带调用方指定的整数 id（不校验唯一性），边携带延迟/带宽属性，
    图本身携带显示名称。只支持插入，不支持删除。
    """

    def __init__(self) -> None:
        self._vertex_ids: List[int] = []
        self._index_by_id: Dict[int, int] = {}
        self._adjacency: List[List[int]] = []
        self._edges: List[EdgeRecord] = []
        self._name: str = GENERIC_NAME
        self._shape: TopologyShape = TopologyShape.generic()
        self._frozen: bool = False

    # ---- 结构修改 ----

    def add_vertex(self, vertex_id: VertexId) -> None:
        """插入一个携带 vertex_id 的新顶点，id 超出 32 位有符号范围时抛出 InvalidArgumentError"""
        self._ensure_mutable()
        self._insert_vertex(validate_vertex_id(vertex_id))
        self._degrade()

    def add_edge(
        self,
        i: VertexId,
        j: VertexId,
        latency: float = DEFAULT_EDGE_PROPERTIES.latency,
        bandwidth: float = DEFAULT_EDGE_PROPERTIES.bandwidth,
    ) -> None:
        """插入 id 为 i 的顶点到 id 为 j 的顶点的有向边

        任一端点不存在时静默忽略。id 重复时使用最先插入的顶点。
        """
        self._ensure_mutable()
        source = self._index_by_id.get(i)
        target = self._index_by_id.get(j)
        if source is not None and target is not None:
            self._insert_edge(source, target, EdgeProperties(latency=latency, bandwidth=bandwidth))
        self._degrade()

    def _insert_vertex(self, vertex_id: int) -> int:
        index = len(self._vertex_ids)
        self._vertex_ids.append(vertex_id)
        self._index_by_id.setdefault(vertex_id, index)
        self._adjacency.append([])
        return index

    def _insert_edge(
        self,
        source: int,
        target: int,
        properties: EdgeProperties = DEFAULT_EDGE_PROPERTIES,
    ) -> None:
        self._edges.append(EdgeRecord(source, target, properties))
        self._adjacency[source].append(target)

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise ImmutableTopologyError(f"拓扑 {self._name} 已冻结，不允许修改结构")

    def _degrade(self) -> None:
        """专用拓扑被修改后转为通用图（终态）"""
        if self._shape.is_generic:
            return
        previous = self._name
        self._shape = TopologyShape.generic()
        self._name = GENERIC_NAME
        logger.debug("topology_degraded", previous=previous, **graph_context(self))

    def _adopt(self, other: Graph) -> None:
        """接管另一个图的存储（复合拓扑折叠完成后使用）"""
        self._vertex_ids = other._vertex_ids
        self._index_by_id = other._index_by_id
        self._adjacency = other._adjacency
        self._edges = other._edges

    # ---- 只读视图 ----

    @property
    def name(self) -> str:
        return self._name

    @property
    def shape(self) -> TopologyShape:
        return self._shape

    @property
    def kind(self) -> TopologyKind:
        return self._shape.kind

    @property
    def is_specialized(self) -> bool:
        return not self._shape.is_generic

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    @property
    def num_vertices(self) -> int:
        return len(self._vertex_ids)

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    @property
    def vertices(self) -> List[int]:
        """顶点 id 列表（插入顺序）"""
        return list(self._vertex_ids)

    @property
    def edges(self) -> List[EdgeEndpoints]:
        """(源 id, 目标 id) 列表（插入顺序）"""
        ids = self._vertex_ids
        return [(ids[edge.source], ids[edge.target]) for edge in self._edges]

    @property
    def diameter(self) -> int:
        """图直径，空图或非强连通为 -1；每次读取都会重新计算"""
        return self._diameter()

    def _diameter(self) -> int:
        return compute_diameter(self._adjacency)

    # ---- 查询 ----

    def has_vertex(self, vertex_id: VertexId) -> bool:
        return vertex_id in self._index_by_id

    def has_edge(self, i: VertexId, j: VertexId) -> bool:
        return self.edge_properties(i, j) is not None

    def neighbors(self, vertex_id: VertexId) -> List[int]:
        """出邻居 id（按边插入顺序，多重边会重复出现）"""
        index = self._index_by_id.get(vertex_id)
        if index is None:
            return []
        return [self._vertex_ids[target] for target in self._adjacency[index]]

    def edge_properties(self, i: VertexId, j: VertexId) -> Optional[EdgeProperties]:
        """第一条 i → j 边的属性，不存在时为 None"""
        source = self._index_by_id.get(i)
        target = self._index_by_id.get(j)
        if source is None or target is None:
            return None
        for edge in self._edges:
            if edge.source == source and edge.target == target:
                return edge.properties
        return None

    def eccentricities(self) -> List[int]:
        """按顶点插入顺序的偏心率，未能到达全部顶点的为 -1"""
        return eccentricities(self._adjacency)

    def edge_records(self) -> Sequence[EdgeRecord]:
        return tuple(self._edges)

    def stats(self) -> TopologyStats:
        """汇总统计信息"""
        return TopologyStats(
            name=self.name,
            kind=self.kind,
            dimensions=self._shape.dimensions,
            num_vertices=self.num_vertices,
            num_edges=self.num_edges,
            diameter=self.diameter,
        )

    # ---- Python 协议 ----

    def __len__(self) -> int:
        return self.num_vertices

    def __mul__(self, other: Graph) -> Graph:
        """笛卡尔积运算符，等价于 gproduct(self, other)"""
        if not isinstance(other, Graph):
            return NotImplemented
        from .product import gproduct
        return gproduct(self, other)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"vertices={self.num_vertices}, edges={self.num_edges})"
        )

class SpecializedTopology(Graph, ABC):
    """专用拓扑基类

    构造后携带形状记录与闭式直径；一旦通过 add_vertex/add_edge 修改结构，
    立即转为通用图，闭式快速路径随之失效。frozen=True 时禁止修改。
    """

    def __init__(self, kind: TopologyKind, dimensions: Tuple[int, ...]):
        super().__init__()
        self._construction_dimensions: Tuple[int, ...] = tuple(dimensions)
        self._shape = TopologyShape(kind=kind, dimensions=self._construction_dimensions)
        self._name = self._display_name()

    def _display_name(self) -> str:
        return self._shape.kind.value

    def _finish(self, frozen: bool) -> None:
        """构造结束：记录日志并按需冻结"""
        self._frozen = frozen
        logger.debug("topology_built", kind=self.kind.value, frozen=frozen, **graph_context(self))

    @abstractmethod
    def _closed_form_diameter(self) -> int:
        """形状记录有效时的闭式直径 - 子类必须实现"""
        pass

    def _diameter(self) -> int:
        if self.is_specialized:
            return self._closed_form_diameter()
        return super()._diameter()

    @classmethod
    @abstractmethod
    def from_dimensions(cls, dimensions: Sequence[int], frozen: bool = False) -> SpecializedTopology:
        """按尺寸序列构造 - 供拓扑工厂使用"""
        pass

class SizedTopology(SpecializedTopology):
    """单一尺寸的基础拓扑（环、链）

    顶点 0..N-1 按构造顺序插入，边模式由子类给出
    """

    topology_kind: ClassVar[TopologyKind]

    def __init__(self, n: int, frozen: bool = False):
        size = validate_size(n)
        super().__init__(self.topology_kind, (size,))
        for vertex_id in range(size):
            self._insert_vertex(vertex_id)
        for source, target in self.edge_pattern(size):
            self._insert_edge(source, target)
        self._finish(frozen)

    @staticmethod
    @abstractmethod
    def edge_pattern(n: int) -> List[Tuple[int, int]]:
        """规范边模式（顶点下标即 id）- 子类必须实现"""
        pass

    @property
    def dimension(self) -> int:
        """构造时的尺寸；转为通用图后保留原值"""
        return self._size

    @property
    def _size(self) -> int:
        return self._construction_dimensions[0]

    @classmethod
    def from_dimensions(cls, dimensions: Sequence[int], frozen: bool = False) -> SizedTopology:
        if len(dimensions) != 1:
            raise InvalidArgumentError(
                f"{cls.topology_kind.value} 需要恰好一个尺寸参数，实际为 {list(dimensions)}"
            )
        return cls(dimensions[0], frozen=frozen)

# 拓扑工厂
class TopologyFactory:
    """拓扑工厂"""

    _registry: Dict[TopologyKind, type] = {}

    @classmethod
    def register(cls, topology_kind: TopologyKind, topology_class: type):
        """注册拓扑种类"""
        cls._registry[TopologyKind.parse(topology_kind)] = topology_class

    @classmethod
    def registered_kinds(cls) -> List[TopologyKind]:
        return [kind for kind in TopologyKind if kind in cls._registry]

    @classmethod
    def create(
        cls,
        topology_kind: TopologyKind | str,
        dimensions: Sequence[int] = (),
        frozen: bool = False,
    ) -> SpecializedTopology:
        """创建拓扑实例"""
        kind = TopologyKind.parse(topology_kind)
        if kind not in cls._registry:
            raise InvalidArgumentError(f"未注册的拓扑种类: {kind.value}")

        topology_class = cls._registry[kind]
        return topology_class.from_dimensions(list(dimensions), frozen=frozen)
