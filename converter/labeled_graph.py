from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set
from collections import deque


@dataclass(eq=False)
class Vertex:
    """A graph vertex identified by its value and a dense integer index."""
    value: str
    index: int

    def __repr__(self) -> str:
        return f"Vertex({self.value!r})"


@dataclass(eq=False)
class Edge:
    """A directed edge carrying an insertion-ordered set of labels."""
    source: Vertex
    target: Vertex
    labels: List[str] = field(default_factory=list)

    def add_label(self, label: str) -> bool:
        """Add a label, returning False if the edge already carries it."""
        if label in self.labels:
            return False
        self.labels.append(label)
        return True

    def __repr__(self) -> str:
        return f"{self.source.value}->{self.target.value}"


class LabeledGraph:
    """
    Directed graph backed by an adjacency matrix.

    Each ordered pair of vertices holds at most one edge; adding a second
    label between the same pair extends the existing edge. Vertices are
    only ever appended, so indices are always 0..n-1.
    """

    def __init__(self):
        self.vertices: List[Vertex] = []
        self._by_value: Dict[str, Vertex] = {}
        self._matrix: List[List[Optional[Edge]]] = []

    def __len__(self) -> int:
        return len(self.vertices)

    def add_vertex(self, value: str) -> Vertex:
        """Create a vertex with the next free index."""
        vertex = Vertex(value, len(self.vertices))
        self.vertices.append(vertex)
        self._by_value.setdefault(value, vertex)

        for row in self._matrix:
            row.append(None)
        self._matrix.append([None] * len(self.vertices))
        return vertex

    def add_edge(self, source: Vertex, target: Vertex, label: str) -> Edge:
        """Create the edge source->target or add the label to the existing one."""
        edge = self._matrix[source.index][target.index]
        if edge is None:
            edge = Edge(source, target, [label])
            self._matrix[source.index][target.index] = edge
        else:
            edge.add_label(label)
        return edge

    def find_vertex(self, value: str) -> Optional[Vertex]:
        return self._by_value.get(value)

    def find_edge(self, source: Vertex, target: Vertex) -> Optional[Edge]:
        return self._matrix[source.index][target.index]

    def has_edge(self, source: Vertex, target: Vertex) -> bool:
        return self._matrix[source.index][target.index] is not None

    def edges_from(self, vertex: Vertex) -> List[Edge]:
        """Outgoing edges of vertex, ordered by target index."""
        return [edge for edge in self._matrix[vertex.index] if edge is not None]

    def edges_to(self, vertex: Vertex) -> List[Edge]:
        """Incoming edges of vertex, ordered by source index."""
        edges = []
        for row in self._matrix:
            edge = row[vertex.index]
            if edge is not None:
                edges.append(edge)
        return edges

    def reachable_from(self, start: Vertex) -> Set[Vertex]:
        """Breadth-first search over outgoing edges."""
        visited = {start}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            for edge in self.edges_from(current):
                if edge.target not in visited:
                    visited.add(edge.target)
                    queue.append(edge.target)

        return visited

    def is_joint(self, start: Vertex) -> bool:
        """True if every vertex can be reached from start."""
        return len(self.reachable_from(start)) == len(self.vertices)

    def find_cycle(self) -> Optional[List[Vertex]]:
        """
        Find any directed cycle.

        Returns:
            The vertices of the cycle in edge order, starting from the vertex
            where it was closed, or None if the graph is acyclic.
            A self-loop is reported as a one-vertex cycle.
        """
        white, grey, black = 0, 1, 2
        colors = [white] * len(self.vertices)

        for root in self.vertices:
            if colors[root.index] != white:
                continue

            # Iterative DFS; the stack holds (vertex, remaining outgoing edges)
            path = [root]
            stack = [(root, iter(self.edges_from(root)))]
            colors[root.index] = grey

            while stack:
                vertex, edges = stack[-1]
                edge = next(edges, None)
                if edge is None:
                    colors[vertex.index] = black
                    stack.pop()
                    path.pop()
                    continue

                target = edge.target
                if colors[target.index] == grey:
                    return path[path.index(target):]
                if colors[target.index] == white:
                    colors[target.index] = grey
                    path.append(target)
                    stack.append((target, iter(self.edges_from(target))))

        return None
