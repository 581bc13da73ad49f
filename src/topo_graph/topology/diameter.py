"""
直径计算引擎
对每个顶点沿出边做广度优先搜索，得到偏心率与直径
"""

from __future__ import annotations

from collections import deque
from typing import List, Sequence

UNREACHABLE = -1
UNDEFINED_DIAMETER = -1

def bfs_distances(adjacency: Sequence[Sequence[int]], source: int) -> List[int]:
    """从 source 出发的最短跳数，不可达为 -1

    adjacency[i] 是顶点下标 i 的出邻居下标列表（允许重复，即多重边）
    """
    distances = [UNREACHABLE] * len(adjacency)
    distances[source] = 0
    queue = deque([source])

    while queue:
        current = queue.popleft()
        next_distance = distances[current] + 1
        for neighbor in adjacency[current]:
            if distances[neighbor] == UNREACHABLE:
                distances[neighbor] = next_distance
                queue.append(neighbor)

    return distances

def eccentricity(adjacency: Sequence[Sequence[int]], source: int) -> int:
    """顶点偏心率；若无法到达全部顶点则为 -1"""
    distances = bfs_distances(adjacency, source)
    if UNREACHABLE in distances:
        return UNREACHABLE
    return max(distances)

def eccentricities(adjacency: Sequence[Sequence[int]]) -> List[int]:
    """所有顶点的偏心率，按顶点下标排列"""
    return [eccentricity(adjacency, source) for source in range(len(adjacency))]

def compute_diameter(adjacency: Sequence[Sequence[int]]) -> int:
    """计算有向图直径

    - 空图: -1
    - 单顶点: 0
    - 非强连通（某次BFS未覆盖全部顶点）: -1
    - 其他: 最大偏心率

    复杂度 O(V·(V+E))，结果不缓存
    """
    num_vertices = len(adjacency)
    if num_vertices == 0:
        return UNDEFINED_DIAMETER
    if num_vertices == 1:
        return 0

    diameter = 0
    for source in range(num_vertices):
        ecc = eccentricity(adjacency, source)
        if ecc == UNREACHABLE:
            return UNDEFINED_DIAMETER
        diameter = max(diameter, ecc)
    return diameter
