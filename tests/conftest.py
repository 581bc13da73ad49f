"""公共测试夹具"""

import pytest

from topo_graph import BGrid, BMesh, BRing, BTorus, Graph, OPG, UMesh, URing


def _sample_generic() -> Graph:
    graph = Graph()
    for vertex_id in range(4):
        graph.add_vertex(vertex_id)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(2, 0)
    graph.add_edge(2, 3)
    return graph


SAMPLE_FACTORIES = {
    "uring5": lambda: URing(5),
    "bring4": lambda: BRing(4),
    "umesh3": lambda: UMesh(3),
    "bmesh2": lambda: BMesh(2),
    "opg": lambda: OPG(),
    "bgrid32": lambda: BGrid([3, 2]),
    "btorus33": lambda: BTorus([3, 3]),
    "generic": _sample_generic,
}


@pytest.fixture(params=sorted(SAMPLE_FACTORIES))
def sample_graph(request) -> Graph:
    """覆盖各类拓扑的样本图"""
    return SAMPLE_FACTORIES[request.param]()


@pytest.fixture(params=["uring5", "bmesh2", "opg", "generic"])
def other_graph(request) -> Graph:
    return SAMPLE_FACTORIES[request.param]()
