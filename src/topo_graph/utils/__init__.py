"""
工具模块初始化
导出函数式工具与日志函数
"""

from .functional import pipe, partition, fold_left, product_of
from .logging import configure_logging, get_logger, graph_context

__all__ = [
    # 函数式工具
    'pipe', 'partition', 'fold_left', 'product_of',

    # 日志
    'configure_logging', 'get_logger', 'graph_context'
]
