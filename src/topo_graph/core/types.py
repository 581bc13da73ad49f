"""
类型定义模块
使用 Pydantic v2 描述拓扑种类、边属性、形状记录与统计信息
"""

from __future__ import annotations

from typing import Tuple, Annotated
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict, field_validator, computed_field

from .errors import InvalidArgumentError

# 基础 Pydantic 配置
class BaseTypeModel(BaseModel):
    """基础类型模型配置"""
    model_config = ConfigDict(
        frozen=True,  # 不可变
        extra='forbid',  # 禁止额外字段
        validate_assignment=True,  # 赋值时验证
        str_strip_whitespace=True,  # 去除空白字符
    )

# 基础类型定义
VertexId = Annotated[int, Field(description="调用方指定的顶点标识")]
EdgeEndpoints = Tuple[int, int]

VERTEX_ID_MIN = -(2 ** 31)
VERTEX_ID_MAX = 2 ** 31 - 1

GENERIC_NAME = "Generic"
TENSOR_SYMBOL = "⊗"

# 拓扑种类
class TopologyKind(str, Enum):
    """拓扑种类枚举，值即规范显示名称"""
    URING = "URing"
    BRING = "BRing"
    UMESH = "UMesh"
    BMESH = "BMesh"
    OPG = "OPG"
    BGRID = "BGrid"
    BTORUS = "BTorus"
    GENERIC = "Generic"

    @property
    def description(self) -> str:
        """获取拓扑种类描述"""
        descriptions = {
            TopologyKind.URING: "单向环 - i → (i+1) mod N",
            TopologyKind.BRING: "双向环 - 环上每条边双向连接",
            TopologyKind.UMESH: "单向链 - i → i+1，无环绕",
            TopologyKind.BMESH: "双向链 - 链上每条边双向连接",
            TopologyKind.OPG: "单点图 - 仅含顶点0",
            TopologyKind.BGRID: "多维网格 - 双向链的笛卡尔积",
            TopologyKind.BTORUS: "多维环面 - 双向环的笛卡尔积",
            TopologyKind.GENERIC: "通用图 - 无形状记录",
        }
        return descriptions[self]

    @property
    def is_composite(self) -> bool:
        """是否为多维复合拓扑"""
        return self in {TopologyKind.BGRID, TopologyKind.BTORUS}

    @property
    def is_specialized(self) -> bool:
        """是否携带形状记录"""
        return self != TopologyKind.GENERIC

    @classmethod
    def parse(cls, value: "TopologyKind | str") -> "TopologyKind":
        """按名称解析，忽略大小写"""
        if isinstance(value, cls):
            return value
        lowered = str(value).strip().lower()
        for kind in cls:
            if kind.value.lower() == lowered or kind.name.lower() == lowered:
                return kind
        raise InvalidArgumentError(f"未知的拓扑种类: {value}")

# 边属性
class EdgeProperties(BaseTypeModel):
    """边属性：延迟与带宽，核心算法不使用"""
    latency: float = Field(default=0.0, description="链路延迟")
    bandwidth: float = Field(default=0.0, description="链路带宽")

DEFAULT_EDGE_PROPERTIES = EdgeProperties()

# 形状记录 - 显式携带的标签变体
class TopologyShape(BaseTypeModel):
    """拓扑形状记录

    kind 决定闭式直径等快速路径是否有效；dimensions 对环/链为 (N,)，
    对单点图为 (1,)，对网格/环面为规范化后的维度序列，对通用图为空。
    """
    kind: TopologyKind = Field(description="拓扑种类")
    dimensions: Tuple[int, ...] = Field(default=(), description="形状尺寸")

    @field_validator('dimensions')
    @classmethod
    def validate_dimensions(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """验证尺寸均为正数"""
        if any(d < 1 for d in v):
            raise ValueError(f"形状尺寸必须为正数: {v}")
        return v

    @computed_field
    @property
    def is_generic(self) -> bool:
        return self.kind == TopologyKind.GENERIC

    @classmethod
    def generic(cls) -> "TopologyShape":
        """通用图形状"""
        return cls(kind=TopologyKind.GENERIC)

# 拓扑统计信息模型
class TopologyStats(BaseTypeModel):
    """拓扑统计信息模型"""
    name: str = Field(description="显示名称")
    kind: TopologyKind = Field(description="拓扑种类")
    dimensions: Tuple[int, ...] = Field(default=(), description="形状尺寸")
    num_vertices: int = Field(ge=0, description="顶点数")
    num_edges: int = Field(ge=0, description="有向边数")
    diameter: int = Field(ge=-1, description="直径，-1表示未定义")

    @computed_field
    @property
    def is_strongly_connected(self) -> bool:
        """是否强连通（空图视为不连通）"""
        return self.diameter >= 0

    @computed_field
    @property
    def average_out_degree(self) -> float:
        """平均出度"""
        return self.num_edges / self.num_vertices if self.num_vertices > 0 else 0.0
