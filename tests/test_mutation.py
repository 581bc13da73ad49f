"""结构修改策略测试：专用拓扑被修改后转为通用图"""

import pytest

from topo_graph import (
    BGrid, BMesh, BRing, BTorus, ImmutableTopologyError, OPG, TopologyKind,
    UMesh, URing
)

SPECIALIZED_FACTORIES = [
    lambda: URing(4),
    lambda: BRing(4),
    lambda: UMesh(4),
    lambda: BMesh(4),
    lambda: OPG(),
    lambda: BGrid([3, 2]),
    lambda: BTorus([3, 3]),
]


@pytest.mark.parametrize("factory", SPECIALIZED_FACTORIES)
def test_add_vertex_degrades_to_generic(factory):
    topology = factory()
    before = topology.num_vertices
    topology.add_vertex(100)

    assert topology.name == "Generic"
    assert topology.kind == TopologyKind.GENERIC
    assert not topology.is_specialized
    assert topology.has_vertex(100)
    assert topology.num_vertices == before + 1
    # 孤立顶点使图不再强连通，直径由 BFS 得出
    assert topology.diameter == -1


@pytest.mark.parametrize("factory", SPECIALIZED_FACTORIES)
def test_add_edge_degrades_to_generic(factory):
    topology = factory()
    before = topology.num_edges
    last = topology.vertices[-1]
    topology.add_edge(last, 0)

    assert topology.name == "Generic"
    assert topology.has_edge(last, 0)
    assert topology.num_edges == before + 1
    assert topology.num_edges == len(topology.edges)


def test_noop_add_edge_still_degrades():
    ring = URing(3)
    ring.add_edge(10, 11)
    assert ring.name == "Generic"
    assert ring.num_edges == 3


def test_diameter_switches_to_bfs_after_mutation():
    ring = URing(6)
    assert ring.diameter == 3
    ring.add_edge(0, 0)
    # 单向环的真实直径为 N-1
    assert ring.diameter == 5


def test_grid_diameter_after_mutation():
    grid = BGrid([2, 2])
    assert grid.num_edges == 8
    grid.add_edge(0, 3)
    assert grid.num_edges == 9
    assert grid.diameter == 2


def test_generic_is_terminal():
    mesh = BMesh(3)
    mesh.add_vertex(3)
    mesh.add_edge(2, 3)
    mesh.add_edge(3, 2)
    assert mesh.name == "Generic"
    assert mesh.kind == TopologyKind.GENERIC
    assert mesh.diameter == 3


def test_shape_values_are_stale_after_mutation():
    ring = BRing(5)
    torus = BTorus([4, 3])
    ring.add_vertex(5)
    torus.add_vertex(12)

    assert ring.dimension == 5
    assert torus.dimensions == [4, 3]
    assert ring.shape.dimensions == ()
    assert torus.stats().dimensions == ()


@pytest.mark.parametrize("factory", [
    lambda: URing(3, frozen=True),
    lambda: BMesh(3, frozen=True),
    lambda: OPG(frozen=True),
    lambda: BGrid([2, 2], frozen=True),
    lambda: BTorus([3], frozen=True),
])
def test_frozen_topology_rejects_mutation(factory):
    topology = factory()
    name = topology.name
    vertices, edges = topology.num_vertices, topology.num_edges

    with pytest.raises(ImmutableTopologyError):
        topology.add_vertex(99)
    with pytest.raises(TypeError):
        topology.add_edge(0, 0)

    assert topology.name == name
    assert topology.is_specialized
    assert topology.num_vertices == vertices
    assert topology.num_edges == edges
