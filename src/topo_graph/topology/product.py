"""
笛卡尔积（张量积）引擎
将两个图组合为新图，顶点为两图顶点的有序对
"""

from __future__ import annotations

from ..core.types import TENSOR_SYMBOL
from ..utils.logging import get_logger, graph_context
from .base import Graph, validate_vertex_id

logger = get_logger(__name__)

def encode_vertex_id(g1_id: int, g2_id: int, g2_num_vertices: int) -> int:
    """积图顶点 id 编码: g1_id * |V(G2)| + g2_id

    按 id 值而非下标编码，只有两图的 id 都是 0..N-1 的稠密区间时才不会冲突
    """
    return g1_id * g2_num_vertices + g2_id

def product_vertex_count(v1: int, v2: int) -> int:
    return v1 * v2

def product_edge_count(v1: int, e1: int, v2: int, e2: int) -> int:
    """积图边数: |V1|·|E2| + |E1|·|V2|"""
    return v1 * e2 + e1 * v2

def product_name(g1: Graph, g2: Graph) -> str:
    return f"{g1.name} {TENSOR_SYMBOL} {g2.name}"

def gproduct(g1: Graph, g2: Graph) -> Graph:
    """计算 G1 ⊗ G2，总是返回新的通用图，不修改输入

    顶点按 (G1 顶点, G2 顶点) 行主序生成；边先是 G1 的每条边沿 G2 的每个顶点复制，
    再是 G2 的每条边沿 G1 的每个顶点复制，边属性随之复制。
    编码后的 id 超出 32 位有符号范围时抛出 InvalidArgumentError。
    """
    g1_ids = g1.vertices
    g2_ids = g2.vertices
    n2 = len(g2_ids)

    result = Graph()
    result._name = product_name(g1, g2)

    # 结果顶点下标 a * n2 + b 对应 (g1_ids[a], g2_ids[b])
    for g1_id in g1_ids:
        for g2_id in g2_ids:
            result._insert_vertex(validate_vertex_id(encode_vertex_id(g1_id, g2_id, n2)))

    for edge in g1.edge_records():
        for b in range(n2):
            result._insert_edge(edge.source * n2 + b, edge.target * n2 + b, edge.properties)

    g2_edges = g2.edge_records()
    for a in range(len(g1_ids)):
        offset = a * n2
        for edge in g2_edges:
            result._insert_edge(offset + edge.source, offset + edge.target, edge.properties)

    if len(result._index_by_id) != result.num_vertices:
        logger.warning(
            "product_id_collision",
            left=g1.name,
            right=g2.name,
            distinct_ids=len(result._index_by_id),
            vertices=result.num_vertices,
        )

    logger.debug("product_built", **graph_context(result))
    return result
