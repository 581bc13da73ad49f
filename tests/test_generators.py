"""基础拓扑生成器测试"""

import pytest

from topo_graph import (
    BMesh, BRing, InvalidArgumentError, OPG, TopologyFactory, TopologyKind,
    UMesh, URing
)
from topo_graph.topology import gproduct


@pytest.mark.parametrize("n", range(1, 9))
def test_uring_counts_and_diameter(n):
    ring = URing(n)
    assert ring.name == "URing"
    assert ring.num_vertices == n
    assert ring.num_edges == (n if n > 1 else 0)
    assert ring.diameter == (n // 2 if n > 1 else 0)
    assert ring.vertices == list(range(n))
    assert ring.dimension == n


@pytest.mark.parametrize("n", range(1, 9))
def test_bring_doubles_uring(n):
    ring = BRing(n)
    assert ring.name == "BRing"
    assert ring.num_edges == 2 * URing(n).num_edges
    assert ring.num_vertices == URing(n).num_vertices
    assert ring.diameter == URing(n).diameter


@pytest.mark.parametrize("n", range(1, 9))
def test_mesh_counts_and_diameter(n):
    uni = UMesh(n)
    bi = BMesh(n)
    assert uni.name == "UMesh"
    assert bi.name == "BMesh"
    assert uni.num_edges == n - 1
    assert bi.num_edges == 2 * uni.num_edges
    assert uni.diameter == (n - 1 if n > 1 else 0)
    assert bi.diameter == uni.diameter


def test_uring_edge_pattern():
    assert URing(5).edges == [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)]


def test_bring_of_two_has_parallel_pairs():
    ring = BRing(2)
    assert ring.edges == [(0, 1), (1, 0), (1, 0), (0, 1)]
    assert ring.num_edges == 4
    assert ring.diameter == 1


def test_mesh_edge_patterns():
    assert UMesh(4).edges == [(0, 1), (1, 2), (2, 3)]
    assert BMesh(3).edges == [(0, 1), (1, 0), (1, 2), (2, 1)]


def test_opg():
    point = OPG()
    assert point.name == "OPG"
    assert point.num_vertices == 1
    assert point.num_edges == 0
    assert point.diameter == 0
    assert point.vertices == [0]
    assert point.dimension == 1


@pytest.mark.parametrize("cls", [URing, BRing, UMesh, BMesh])
@pytest.mark.parametrize("bad", [0, -3, 2.5, True, "4"])
def test_invalid_size_rejected(cls, bad):
    with pytest.raises(InvalidArgumentError):
        cls(bad)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        URing(0)


@pytest.mark.parametrize("cls,n", [(BRing, 6), (BMesh, 5), (BRing, 7)])
def test_closed_form_matches_bfs_for_bidirectional(cls, n):
    topology = cls(n)
    # 与单点图的积是通用图，直径走 BFS
    assert gproduct(topology, OPG()).diameter == topology.diameter


def test_specialized_shape_record():
    ring = BRing(6)
    assert ring.is_specialized
    assert ring.kind == TopologyKind.BRING
    assert ring.shape.dimensions == (6,)
    assert ring.stats().dimensions == (6,)


def test_factory_creates_registered_kinds():
    assert isinstance(TopologyFactory.create("uring", [5]), URing)
    assert isinstance(TopologyFactory.create(TopologyKind.BMESH, [3]), BMesh)
    assert isinstance(TopologyFactory.create("OPG"), OPG)
    assert TopologyFactory.create("btorus", [3, 4]).name == "BTorus[4,3]"
    assert TopologyFactory.create("bgrid").name == "BGrid[]"


def test_factory_registry_lists_all_specialized_kinds():
    kinds = TopologyFactory.registered_kinds()
    assert TopologyKind.GENERIC not in kinds
    assert set(kinds) == {k for k in TopologyKind if k.is_specialized}


@pytest.mark.parametrize("kind,dims", [
    ("uring", []),
    ("bmesh", [2, 3]),
    ("opg", [4]),
    ("generic", []),
    ("hypercube", [2]),
])
def test_factory_rejects_bad_requests(kind, dims):
    with pytest.raises(InvalidArgumentError):
        TopologyFactory.create(kind, dims)


def test_frozen_construction_is_reported():
    assert URing(3, frozen=True).is_frozen
    assert not URing(3).is_frozen
