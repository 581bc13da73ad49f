"""
异常定义
构造期误用直接抛出异常；运行期结构查询使用哨兵值（直径 -1、缺失端点的加边为空操作）
"""


class TopologyError(Exception):
    """拓扑模块异常基类"""


class InvalidArgumentError(TopologyError, ValueError):
    """无效的尺寸、维度或拓扑种类"""


class OutOfRangeError(TopologyError, IndexError):
    """维度索引超出规范化序列长度"""


class ImmutableTopologyError(TopologyError, TypeError):
    """对冻结的专用拓扑进行结构修改"""


__all__ = [
    "TopologyError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "ImmutableTopologyError",
]
