import pytest

from dsakit.graphs import DirectedGraph, UndirectedGraph, adjacency_matrix

UNDIRECTED_EDGES = [(0, 1), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (3, 4)]
DIRECTED_EDGES = [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]


@pytest.fixture
def undirected():
    graph = UndirectedGraph(5)
    for u, v in UNDIRECTED_EDGES:
        graph.add_edge(u, v)
    return graph


@pytest.fixture
def directed():
    graph = DirectedGraph()
    for v, w in DIRECTED_EDGES:
        graph.add_edge(v, w)
    return graph


def test_neighbours_keep_insertion_order(undirected):
    assert undirected.neighbours(0) == [1, 4]
    assert undirected.neighbours(1) == [0, 2, 3, 4]


def test_edges_are_symmetric(undirected):
    for u, v in UNDIRECTED_EDGES:
        assert v in undirected.neighbours(u)
        assert u in undirected.neighbours(v)


def test_degree_sum_is_twice_edge_count(undirected):
    total = sum(len(undirected.neighbours(v)) for v in range(len(undirected)))
    assert total == 2 * len(UNDIRECTED_EDGES)


def test_neighbours_returns_copy(undirected):
    undirected.neighbours(0).append(3)
    assert undirected.neighbours(0) == [1, 4]


def test_add_edge_out_of_range():
    graph = UndirectedGraph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        UndirectedGraph(-1)


def test_format_lists_each_vertex(undirected):
    text = undirected.format()
    for v in range(5):
        assert f" Adjacency list of vertex {v}\n head " in text
    assert "\n Adjacency list of vertex 0\n head -> 1-> 4\n" in text
    assert str(undirected) == text


def test_format_empty_vertex():
    assert UndirectedGraph(1).format() == "\n Adjacency list of vertex 0\n head \n"


def test_bfs_order(directed):
    assert directed.bfs(2) == [2, 0, 3, 1]


def test_dfs_order(directed):
    assert directed.dfs(2) == [2, 0, 1, 3]


def test_traversals_visit_each_reachable_vertex_once(directed):
    for start in range(4):
        bfs = directed.bfs(start)
        dfs = directed.dfs(start)
        assert bfs[0] == start and dfs[0] == start
        assert len(bfs) == len(set(bfs))
        assert set(bfs) == set(dfs)


def test_traversal_from_isolated_vertex():
    graph = DirectedGraph()
    graph.add_edge(1, 2)
    assert graph.bfs(2) == [2]
    assert graph.dfs(7) == [7]


def test_dfs_deep_chain_does_not_recurse():
    graph = DirectedGraph()
    for v in range(5000):
        graph.add_edge(v, v + 1)
    assert graph.dfs(0) == list(range(5001))
    assert graph.bfs(0) == list(range(5001))


def test_adjacency_matrix_symmetric():
    edges = [(1, 2), (2, 3), (3, 1)]
    matrix = adjacency_matrix(3, edges)
    assert len(matrix) == 4 and all(len(row) == 4 for row in matrix)
    for u, v in edges:
        assert matrix[u][v] == 1 and matrix[v][u] == 1
    assert sum(map(sum, matrix)) == 2 * len(edges)


def test_adjacency_matrix_rejects_bad_vertex():
    with pytest.raises(IndexError):
        adjacency_matrix(2, [(0, 3)])