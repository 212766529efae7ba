"""Undirected weighted graph over string node keys.

Node keys follow the ``"<LINE_CODE>~<DISPLAY_NAME>"`` convention; the
graph itself does not enforce it; only the line code helpers and the
itinerary formatter depend on it.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from ..domain.errors import MalformedNodeNameError

NODE_SEPARATOR = "~"

logger = logging.getLogger(__name__)


def split_node_key(key: str) -> Tuple[str, str]:
    """Split a node key into ``(line_code, display_name)``.

    Raises:
        MalformedNodeNameError: If the key does not contain exactly one ``~``.
    """
    if key.count(NODE_SEPARATOR) != 1:
        raise MalformedNodeNameError(
            f"Node key must contain exactly one '{NODE_SEPARATOR}': {key!r}",
            node_key=key,
        )
    line_code, display_name = key.split(NODE_SEPARATOR)
    return line_code, display_name


def line_code_of(key: str) -> str:
    """Return the line code of ``key`` (the part before ``~``)."""
    return split_node_key(key)[0]


class Graph:
    """Simple undirected graph with positive integer edge weights.

    Each node maps to its neighbor table (neighbor key -> weight); every
    edge is stored once per endpoint with the same weight.

    The graph must not be mutated while a search runs over it. Use
    ``copy()`` to hand an independent snapshot to concurrent searches.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, Dict[str, int]] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"

    # --- Nodes -----------------------------------------------------------

    def add_node(self, key: str) -> None:
        """Create ``key``; existing nodes keep their adjacency."""
        self._adjacency.setdefault(key, {})

    def remove_node(self, key: str) -> None:
        """Remove ``key`` and every edge incident to it."""
        neighbors = self._adjacency.pop(key, None)
        if neighbors is None:
            return
        for neighbor in neighbors:
            self._adjacency[neighbor].pop(key, None)

    def has_node(self, key: str) -> bool:
        return key in self._adjacency

    def node_count(self) -> int:
        return len(self._adjacency)

    def nodes(self) -> List[str]:
        """Return node keys in insertion order."""
        return list(self._adjacency)

    # --- Edges -----------------------------------------------------------

    def add_edge(self, a: str, b: str, weight: int) -> None:
        """Connect ``a`` and ``b`` with ``weight``.

        No-op if either node is absent, ``a == b`` (no self-loops) or the
        nodes are already connected. ``weight`` must be a positive integer;
        this is not validated.
        """
        if a == b:
            return
        first = self._adjacency.get(a)
        second = self._adjacency.get(b)
        if first is None or second is None or b in first:
            return
        first[b] = weight
        second[a] = weight

    def remove_edge(self, a: str, b: str) -> None:
        if not self.has_edge(a, b):
            return
        del self._adjacency[a][b]
        del self._adjacency[b][a]

    def has_edge(self, a: str, b: str) -> bool:
        return b in self._adjacency.get(a, {})

    def weight(self, a: str, b: str) -> Optional[int]:
        """Return the weight of edge ``a``-``b``, or None if absent."""
        return self._adjacency.get(a, {}).get(b)

    def edge_count(self) -> int:
        """Number of undirected edges, each counted once."""
        return sum(len(neighbors) for neighbors in self._adjacency.values()) // 2

    def edges(self) -> List[Tuple[str, str, int]]:
        """Return every edge once as ``(a, b, weight)``."""
        seen = set()
        result: List[Tuple[str, str, int]] = []
        for a, neighbors in self._adjacency.items():
            for b, weight in neighbors.items():
                if b in seen:
                    continue
                result.append((a, b, weight))
            seen.add(a)
        return result

    def neighbors_of(self, key: str) -> List[Tuple[str, int]]:
        """Return ``(neighbor, weight)`` pairs; empty if ``key`` is absent."""
        return list(self._adjacency.get(key, {}).items())

    # --- Views -----------------------------------------------------------

    def adjacency(self) -> Mapping[str, Mapping[str, int]]:
        """Read-only view of node -> {neighbor: weight}."""
        return MappingProxyType(
            {key: MappingProxyType(nbrs) for key, nbrs in self._adjacency.items()}
        )

    def copy(self) -> Graph:
        """Return an independent snapshot of this graph."""
        clone = Graph()
        clone._adjacency = {
            key: dict(neighbors) for key, neighbors in self._adjacency.items()
        }
        return clone

    # --- Line codes ------------------------------------------------------

    def line_codes(self) -> List[str]:
        """Return the upper-cased line code of every node, in node order.

        Keys without a valid separator fall back to their first three
        characters.
        """
        codes: List[str] = []
        for key in self._adjacency:
            try:
                codes.append(line_code_of(key).upper())
            except MalformedNodeNameError:
                logger.warning(
                    "Node key has no line code, using prefix",
                    extra={"node_key": key},
                )
                codes.append(key[:3].upper())
        return codes

    def find_by_line_code(self, code: str) -> List[str]:
        """Return node keys whose line code matches ``code`` (case-insensitive)."""
        wanted = code.strip().upper()
        return [
            key
            for key, key_code in zip(self._adjacency, self.line_codes())
            if key_code == wanted
        ]
