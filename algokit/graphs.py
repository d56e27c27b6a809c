"""Traversals, ancestors and shortest paths on adjacency-list graphs.

A graph is a sequence indexed by vertex 0..n-1. Unweighted graphs hold
neighbour lists; weighted graphs hold (neighbour, weight) pairs.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Iterable, Sequence

Graph = Sequence[Iterable[int]]
WeightedGraph = Sequence[Iterable[tuple[int, float]]]


def _check_vertex(graph: Sequence, v: int) -> None:
    if not 0 <= v < len(graph):
        raise ValueError(f"vertex {v} is not in the graph")


def bfs(graph: Graph, start: int) -> list[int]:
    """Vertices reachable from start, in breadth-first order."""
    _check_vertex(graph, start)
    visited = [False] * len(graph)
    visited[start] = True
    order: list[int] = []
    queue = deque([start])
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in graph[u]:
            if not visited[v]:
                visited[v] = True
                queue.append(v)
    return order


def dfs(graph: Graph, start: int) -> list[int]:
    """Vertices reachable from start, in depth-first preorder."""
    _check_vertex(graph, start)
    visited = [False] * len(graph)
    visited[start] = True
    order = [start]
    stack = [iter(graph[start])]
    while stack:
        for v in stack[-1]:
            if not visited[v]:
                visited[v] = True
                order.append(v)
                stack.append(iter(graph[v]))
                break
        else:
            stack.pop()
    return order


class LowestCommonAncestor:
    """Binary-lifting ancestor queries on a weighted tree.

    ``depth[v]`` holds the weighted distance from the root to v.
    """

    def __init__(self, tree: WeightedGraph, root: int = 0) -> None:
        _check_vertex(tree, root)
        n = len(tree)
        self.root = root
        self.depth: list[float] = [0] * n
        self._tin = [-1] * n
        self._tout = [-1] * n
        parent = [root] * n
        timer = 0
        self._tin[root] = timer
        stack = [(root, iter(tree[root]))]
        while stack:
            u, neighbours = stack[-1]
            for v, w in neighbours:
                if self._tin[v] == -1:
                    parent[v] = u
                    self.depth[v] = self.depth[u] + w
                    timer += 1
                    self._tin[v] = timer
                    stack.append((v, iter(tree[v])))
                    break
            else:
                timer += 1
                self._tout[u] = timer
                stack.pop()
        self._up = [parent]
        for _ in range(1, max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[prev[v]] for v in range(n)])

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._tin) or self._tin[v] == -1:
            raise ValueError(f"vertex {v} is not in the tree")

    def is_ancestor(self, u: int, v: int) -> bool:
        """Whether u is v or lies on the path from v to the root."""
        self._check(u)
        self._check(v)
        return self._tin[u] <= self._tin[v] and self._tout[u] >= self._tout[v]

    def lca(self, u: int, v: int) -> int:
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for level in reversed(self._up):
            if not self.is_ancestor(level[v], u):
                v = level[v]
        return self._up[0][v]


def topological_sort(graph: Graph) -> list[int]:
    """Kahn's ordering of a directed acyclic graph; raises ValueError on a cycle."""
    n = len(graph)
    incoming = [0] * n
    for neighbours in graph:
        for v in neighbours:
            incoming[v] += 1
    sources = deque(v for v in range(n) if incoming[v] == 0)
    order: list[int] = []
    while sources:
        u = sources.popleft()
        order.append(u)
        for v in graph[u]:
            incoming[v] -= 1
            if incoming[v] == 0:
                sources.append(v)
    if len(order) != n:
        raise ValueError("graph has a cycle")
    return order


def dijkstra(graph: WeightedGraph, source: int) -> list[float]:
    """Shortest distances from source; math.inf marks unreachable vertices."""
    _check_vertex(graph, source)
    adjacency = [list(edges) for edges in graph]
    if any(w < 0 for edges in adjacency for _, w in edges):
        raise ValueError("edge weights must not be negative")
    dist = [math.inf] * len(graph)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in adjacency[u]:
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                heapq.heappush(heap, (nd, v))
    return dist


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a matrix of direct edge lengths.

    Missing edges are math.inf. The input is left unchanged.
    """
    dist = [list(row) for row in matrix]
    n = len(dist)
    if any(len(row) != n for row in dist):
        raise ValueError("matrix must be square")
    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            d_ik = dist[i][k]
            if i == k or d_ik == math.inf:
                continue
            row_i = dist[i]
            for j in range(n):
                nd = d_ik + row_k[j]
                if nd < row_i[j]:
                    row_i[j] = nd
    return dist