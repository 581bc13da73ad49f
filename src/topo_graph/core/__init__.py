"""
核心模块初始化
导出主要的类型和异常
"""

from .types import (
    VertexId, EdgeEndpoints, TopologyKind, EdgeProperties, TopologyShape,
    TopologyStats, GENERIC_NAME, TENSOR_SYMBOL
)

from .errors import (
    TopologyError, InvalidArgumentError, OutOfRangeError, ImmutableTopologyError
)

__all__ = [
    # 类型
    'VertexId', 'EdgeEndpoints', 'TopologyKind', 'EdgeProperties',
    'TopologyShape', 'TopologyStats', 'GENERIC_NAME', 'TENSOR_SYMBOL',

    # 异常
    'TopologyError', 'InvalidArgumentError', 'OutOfRangeError',
    'ImmutableTopologyError'
]
