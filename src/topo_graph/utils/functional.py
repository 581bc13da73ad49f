"""
简化的工具函数
提供拓扑构造用到的函数式小工具，不依赖第三方库
"""

from __future__ import annotations

from typing import TypeVar, Callable, Iterable, List, Any

T = TypeVar('T')
U = TypeVar('U')

# 基本的管道操作
def pipe(value: T, *functions: Callable[[Any], Any]) -> Any:
    """管道操作：将值通过一系列函数传递"""
    result = value
    for func in functions:
        result = func(result)
    return result

# 分区函数
def partition(predicate: Callable[[T], bool], iterable: Iterable[T]) -> tuple[List[T], List[T]]:
    """根据谓词分区"""
    true_items, false_items = [], []
    for item in iterable:
        (true_items if predicate(item) else false_items).append(item)
    return true_items, false_items

# 左折叠
def fold_left(func: Callable[[U, T], U], iterable: Iterable[T], initial: U) -> U:
    """左结合折叠：func(func(initial, x1), x2) ...

    以累加器迭代实现，中间结果在下一步即被丢弃
    """
    acc = initial
    for item in iterable:
        acc = func(acc, item)
    return acc

# 连乘
def product_of(values: Iterable[int]) -> int:
    """整数序列的乘积，空序列为1"""
    return fold_left(lambda acc, v: acc * v, values, 1)
