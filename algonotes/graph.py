"""Graph traversal, connectivity, matching, shortest paths, Euler tours and MSTs.

Graphs are adjacency lists indexed by vertex 0 .. n-1. Undirected graphs list
every edge in both endpoints' lists.
"""

from __future__ import annotations

import heapq
import math
from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

from .dsu import UnionFind

Adjacency = Sequence[Sequence[int]]


def bfs(adj: Adjacency, source: int) -> tuple[list[int | None], list[int], bool]:
    """Breadth-first search from source.

    Returns (dist, parent, bipartite): hop distances (None where unreachable),
    BFS-tree parents (-1 for the source and unreached vertices), and whether
    the component of source is bipartite.
    """
    n = len(adj)
    dist: list[int | None] = [None] * n
    parent = [-1] * n
    dist[source] = 0
    bipartite = True
    queue = deque([source])
    while queue:
        u = queue.popleft()
        du = dist[u]
        for v in adj[u]:
            dv = dist[v]
            if dv is None:
                dist[v] = du + 1
                parent[v] = u
                queue.append(v)
            elif dv % 2 == du % 2:
                bipartite = False
    return dist, parent, bipartite


def dfs(adj: Adjacency, start: int, visited: set[int] | None = None) -> list[int]:
    """Depth-first preorder from start, skipping and extending ``visited``."""
    if visited is None:
        visited = set()
    if start in visited:
        return []
    visited.add(start)
    order = [start]
    stack = [iter(adj[start])]
    while stack:
        for v in stack[-1]:
            if v not in visited:
                visited.add(v)
                order.append(v)
                stack.append(iter(adj[v]))
                break
        else:
            stack.pop()
    return order


def count_components(adj: Adjacency) -> int:
    """Number of connected components of an undirected graph."""
    visited: set[int] = set()
    count = 0
    for u in range(len(adj)):
        if u not in visited:
            dfs(adj, u, visited)
            count += 1
    return count


def articulation_points(adj: Adjacency) -> list[int]:
    """Sorted cut vertices of an undirected graph."""
    n = len(adj)
    num = [-1] * n
    low = [0] * n
    parent = [-1] * n
    is_cut = [False] * n
    counter = 0
    for root in range(n):
        if num[root] != -1:
            continue
        root_children = 0
        num[root] = low[root] = counter
        counter += 1
        frames = [(root, iter(adj[root]))]
        while frames:
            u, neighbours = frames[-1]
            for v in neighbours:
                if num[v] == -1:
                    parent[v] = u
                    if u == root:
                        root_children += 1
                    num[v] = low[v] = counter
                    counter += 1
                    frames.append((v, iter(adj[v])))
                    break
                if v != parent[u]:
                    low[u] = min(low[u], num[v])
            else:
                frames.pop()
                if frames:
                    p = frames[-1][0]
                    if low[u] >= num[p]:
                        is_cut[p] = True
                    low[p] = min(low[p], low[u])
        is_cut[root] = root_children > 1
    return [u for u in range(n) if is_cut[u]]


def strongly_connected_components(adj: Adjacency) -> list[list[int]]:
    """Tarjan's algorithm; components come out in reverse topological order."""
    n = len(adj)
    num = [-1] * n
    low = [0] * n
    on_stack = [False] * n
    stack: list[int] = []
    components: list[list[int]] = []
    counter = 0
    for s in range(n):
        if num[s] != -1:
            continue
        num[s] = low[s] = counter
        counter += 1
        stack.append(s)
        on_stack[s] = True
        frames = [(s, iter(adj[s]))]
        while frames:
            u, neighbours = frames[-1]
            for v in neighbours:
                if num[v] == -1:
                    num[v] = low[v] = counter
                    counter += 1
                    stack.append(v)
                    on_stack[v] = True
                    frames.append((v, iter(adj[v])))
                    break
                if on_stack[v]:
                    low[u] = min(low[u], low[v])
            else:
                frames.pop()
                if low[u] == num[u]:
                    component = []
                    while True:
                        v = stack.pop()
                        on_stack[v] = False
                        component.append(v)
                        if v == u:
                            break
                    components.append(component)
                if frames:
                    p = frames[-1][0]
                    if on_stack[u]:
                        low[p] = min(low[p], low[u])
    return components


def biconnected_components(adj: Adjacency) -> list[list[int]]:
    """Edge-biconnected blocks of an undirected graph.

    A vertex may belong to several blocks; an isolated vertex forms a block
    of its own.
    """
    n = len(adj)
    num = [-1] * n
    low = [-1] * n
    counter = 0
    components: list[list[int]] = []
    for root in range(n):
        if num[root] > -1:
            continue
        counter += 1
        num[root] = low[root] = counter
        if not adj[root]:
            components.append([root])
            continue
        stack = [root]
        frames = [(root, iter(adj[root]))]
        while frames:
            x, neighbours = frames[-1]
            for y in neighbours:
                if num[y] > -1:
                    low[x] = min(low[x], num[y])
                else:
                    counter += 1
                    num[y] = low[y] = counter
                    stack.append(y)
                    frames.append((y, iter(adj[y])))
                    break
            else:
                frames.pop()
                if not frames:
                    continue
                p = frames[-1][0]
                low[p] = min(low[p], low[x])
                if p == root or low[x] >= num[p]:
                    component = [p]
                    while True:
                        u = stack.pop()
                        component.append(u)
                        if u == x:
                            break
                    components.append(component)
    return components


def _augment(adj: Adjacency, root: int, match: list[int], visited: list[bool]) -> bool:
    if visited[root]:
        return False
    visited[root] = True
    frames = [(root, iter(adj[root]))]
    via: list[int] = []
    while frames:
        left, rights = frames[-1]
        for right in rights:
            partner = match[right]
            if partner == -1:
                match[right] = left
                for (owner, _), step in zip(frames, via):
                    match[step] = owner
                return True
            if not visited[partner]:
                visited[partner] = True
                via.append(right)
                frames.append((partner, iter(adj[partner])))
                break
        else:
            frames.pop()
            if via:
                via.pop()
    return False


def max_bipartite_matching(adj: Adjacency, n_left: int, n_right: int) -> list[tuple[int, int]]:
    """Maximum matching by augmenting paths.

    ``adj[left]`` lists the right vertices (0 .. n_right-1) joined to left.
    Returns the matched (left, right) pairs sorted by left vertex.
    """
    match = [-1] * n_right
    for left in range(n_left):
        _augment(adj, left, match, [False] * n_left)
    return sorted((left, right) for right, left in enumerate(match) if left != -1)


def dijkstra(
    adj: Sequence[Sequence[tuple[int, float]]], sources: int | Iterable[int]
) -> list[float | None]:
    """Shortest distances from one or several sources; None where unreachable.

    ``adj[u]`` holds (v, weight) pairs with non-negative weights.
    """
    if isinstance(sources, int):
        sources = (sources,)
    dist: list[float] = [math.inf] * len(adj)
    heap = []
    for s in sources:
        dist[s] = 0
        heap.append((0, s))
    heapq.heapify(heap)
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in adj[u]:
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                heapq.heappush(heap, (nd, v))
    return [None if d == math.inf else d for d in dist]


def euler_path(adj: Adjacency, start: int) -> list[int]:
    """Hierholzer's algorithm on a directed graph, starting at start."""
    position = [0] * len(adj)
    stack = [start]
    path: list[int] = []
    while stack:
        u = stack[-1]
        if position[u] < len(adj[u]):
            stack.append(adj[u][position[u]])
            position[u] += 1
        else:
            path.append(stack.pop())
    path.reverse()
    return path


def _pair_edges(adj: Adjacency) -> tuple[list[list[int]], int]:
    waiting: defaultdict[tuple[int, int], list[int]] = defaultdict(list)
    ids: list[list[int]] = []
    count = 0
    for u, neighbours in enumerate(adj):
        row = []
        for v in neighbours:
            pending = waiting[(u, v)]
            if pending:
                row.append(pending.pop())
            else:
                row.append(count)
                waiting[(v, u)].append(count)
                count += 1
        ids.append(row)
    if any(waiting.values()):
        raise ValueError("adjacency lists do not describe an undirected graph")
    return ids, count


def euler_circuit_undirected(adj: Adjacency, start: int = 0) -> list[int]:
    """Hierholzer's algorithm on an undirected graph, using every edge once."""
    ids, n_edges = _pair_edges(adj)
    used = [False] * n_edges
    position = [0] * len(adj)
    stack = [start]
    circuit: list[int] = []
    while stack:
        u = stack[-1]
        row = adj[u]
        while position[u] < len(row) and used[ids[u][position[u]]]:
            position[u] += 1
        if position[u] < len(row):
            used[ids[u][position[u]]] = True
            stack.append(row[position[u]])
            position[u] += 1
        else:
            circuit.append(stack.pop())
    circuit.reverse()
    return circuit


def kruskal(n: int, edges: Iterable[tuple[int, int, float]]) -> tuple[float, list[tuple[int, int, float]]]:
    """Minimum spanning forest of (u, v, weight) edges; returns (cost, chosen edges)."""
    forest = UnionFind(n)
    cost = 0
    chosen: list[tuple[int, int, float]] = []
    for w, u, v in sorted((w, u, v) for u, v, w in edges):
        if len(chosen) >= n - 1:
            break
        if forest.union(u, v):
            cost += w
            chosen.append((u, v, w))
    return cost, chosen