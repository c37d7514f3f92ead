from collections.abc import Hashable, Iterator
from typing import Generic, TypeVar

V = TypeVar("V", bound=Hashable)
L = TypeVar("L")


class LabeledGraph(Generic[V, L]):
    """
    Directed graph with labeled edges.
    Vertices are registered on first use and keep insertion order; so do the
    outgoing edges of each vertex.
    """

    def __init__(self):
        # vertex -> {successor -> label}; dicts keep insertion order
        self._adj: dict[V, dict[V, L]] = {}

    def set(self, from_: V, to: V, label: L) -> None:
        self._adj.setdefault(from_, {})[to] = label
        self._adj.setdefault(to, {})

    def get(self, from_: V, to: V) -> L | None:
        return self._adj.get(from_, {}).get(to)

    def remove(self, from_: V, to: V) -> None:
        self._adj.get(from_, {}).pop(to, None)

    def get_successors(self, from_: V) -> list[V]:
        return list(self._adj.get(from_, ()))

    def get_vertex_labels(self) -> list[V]:
        return list(self._adj)

    def is_vertex_label(self, x: V) -> bool:
        return x in self._adj

    def edges(self) -> Iterator[tuple[V, V, L]]:
        for u, out in self._adj.items():
            for v, label in out.items():
                yield u, v, label

    def clear(self) -> None:
        self._adj.clear()

    def __contains__(self, x: object) -> bool:
        return x in self._adj

    def __len__(self) -> int:
        return len(self._adj)
