"""
维度规范化
网格与环面共用：去掉所有1，降序排列，空序列以 (1,) 表示单点图
"""

from __future__ import annotations

from collections.abc import Sequence as SequenceABC
from typing import Iterable, Sequence, Tuple, overload

from ..core.errors import InvalidArgumentError, OutOfRangeError
from ..utils.functional import partition, pipe

DEGENERATE_DIMENSIONS: Tuple[int, ...] = (1,)

def validate_size(value: int, label: str = "尺寸") -> int:
    """验证尺寸为正整数"""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{label}必须为整数: {value!r}")
    if value < 1:
        raise InvalidArgumentError(f"{label}必须为正数: {value}")
    return value

def _drop_ones(dimensions: Sequence[int]) -> Sequence[int]:
    _, rest = partition(lambda d: d == 1, dimensions)
    return rest

def _sort_descending(dimensions: Sequence[int]) -> Tuple[int, ...]:
    return tuple(sorted(dimensions, reverse=True))

def _degenerate_if_empty(dimensions: Tuple[int, ...]) -> Tuple[int, ...]:
    return dimensions if dimensions else DEGENERATE_DIMENSIONS

def canonicalize_dimensions(dimensions: Iterable[int]) -> Tuple[int, ...]:
    """规范化维度序列

    - 任一维度为0（或非正整数）时抛出 InvalidArgumentError
    - 去掉所有1，其余降序排列
    - 结果为空时返回 (1,)，表示退化为单点图

    对已规范化的序列是幂等的。
    """
    checked = [validate_size(d, "维度") for d in dimensions]
    return pipe(checked, _drop_ones, _sort_descending, _degenerate_if_empty)

def is_degenerate(dimensions: Sequence[int]) -> bool:
    return tuple(dimensions) == DEGENERATE_DIMENSIONS

def format_dimensions(dimensions: Sequence[int]) -> str:
    """显示名称中的维度部分，单点图为空"""
    if is_degenerate(dimensions):
        return ""
    return ",".join(str(d) for d in dimensions)

class DimensionsView(SequenceABC):
    """规范化维度序列的只读视图

    下标必须满足 0 <= index < len(view)，否则抛出 OutOfRangeError
    """

    __slots__ = ("_dimensions",)

    def __init__(self, dimensions: Iterable[int]):
        self._dimensions: Tuple[int, ...] = tuple(dimensions)

    def __len__(self) -> int:
        return len(self._dimensions)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[int, ...]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._dimensions[index]
        if not 0 <= index < len(self._dimensions):
            raise OutOfRangeError(
                f"维度索引 {index} 超出范围 [0, {len(self._dimensions) - 1}]"
            )
        return self._dimensions[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DimensionsView):
            return self._dimensions == other._dimensions
        if isinstance(other, (list, tuple)):
            return list(self._dimensions) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._dimensions)

    def __repr__(self) -> str:
        return f"DimensionsView({list(self._dimensions)})"
