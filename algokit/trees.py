"""Classic problems on trees: centroids, subtree counts and distances."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence


def _bfs_tree(adjacency: Sequence[Iterable[int]], root: int) -> tuple[list[int], list[int]]:
    """Parent of every vertex (-1 for the root and unreached) and BFS order."""
    parent = [-1] * len(adjacency)
    seen = [False] * len(adjacency)
    seen[root] = True
    order: list[int] = []
    queue = deque([root])
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adjacency[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                queue.append(v)
    return parent, order


def _build(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    edges = list(edges)
    if len(edges) != n - 1:
        raise ValueError(f"a tree on {n} vertices has {n - 1} edges")
    graph: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"edge ({a}, {b}) has a vertex outside 1..{n}")
        graph[a - 1].append(b - 1)
        graph[b - 1].append(a - 1)
    return graph


def _distances(graph: list[list[int]], root: int) -> tuple[int, list[int]]:
    """Farthest vertex from root (last in BFS order) and all distances."""
    parent, order = _bfs_tree(graph, root)
    if len(order) != len(graph):
        raise ValueError("edges do not connect all vertices")
    dist = [0] * len(graph)
    for v in order[1:]:
        dist[v] = dist[parent[v]] + 1
    return order[-1], dist


def centroids(adjacency: Sequence[Iterable[int]], root: int) -> tuple[int, int]:
    """The centroids of the tree containing root; both entries equal when there is one."""
    adjacency = [list(nbrs) for nbrs in adjacency]
    if not 0 <= root < len(adjacency):
        raise ValueError(f"vertex {root} is not in the tree")
    parent, order = _bfs_tree(adjacency, root)
    size = [0] * len(adjacency)
    for v in reversed(order):
        size[v] += 1
        if parent[v] != -1:
            size[parent[v]] += size[v]
    total = size[root]
    v = root
    while True:
        for u in adjacency[v]:
            if u != parent[v] and size[u] > total // 2:
                v = u
                break
        else:
            break
    second = v
    for u in adjacency[v]:
        if 2 * size[u] == total:
            second = u
    return v, second


def subordinates(bosses: Sequence[int]) -> list[int]:
    """Number of subordinates of each employee.

    bosses[i] is the 1-based boss of employee i + 2; employee 1 is the head.
    """
    n = len(bosses) + 1
    children: list[list[int]] = [[] for _ in range(n)]
    for employee, boss in enumerate(bosses, start=1):
        if not 1 <= boss <= n:
            raise ValueError(f"boss {boss} is outside 1..{n}")
        children[boss - 1].append(employee)
    _, order = _bfs_tree(children, 0)
    if len(order) != n:
        raise ValueError("not every employee reports to employee 1")
    counts = [0] * n
    for v in reversed(order):
        counts[v] = sum(1 + counts[c] for c in children[v])
    return counts


def tree_max_distances(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """For each vertex, the distance to the farthest vertex (edges are 1-based)."""
    graph = _build(n, edges)
    end_a, _ = _distances(graph, 0)
    end_b, from_a = _distances(graph, end_a)
    _, from_b = _distances(graph, end_b)
    return [max(x, y) for x, y in zip(from_a, from_b)]


def tree_distance_sums(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """For each vertex, the sum of distances to all other vertices (edges are 1-based)."""
    graph = _build(n, edges)
    parent, order = _bfs_tree(graph, 0)
    if len(order) != n:
        raise ValueError("edges do not connect all vertices")
    depth = [0] * n
    for v in order[1:]:
        depth[v] = depth[parent[v]] + 1
    size = [1] * n
    for v in reversed(order[1:]):
        size[parent[v]] += size[v]
    sums = [0] * n
    sums[0] = sum(depth)
    for v in order[1:]:
        sums[v] = sums[parent[v]] - size[v] + (n - size[v])
    return sums