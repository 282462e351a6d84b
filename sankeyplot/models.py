"""Data models for sankeyplot diagrams."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from .errors import DuplicateNodeError


@dataclass(frozen=True)
class Node:
    """A laid-out node: an id, an optional label and its rectangle."""

    id: int
    x0: float
    y0: float
    x1: float
    y1: float
    label: str | None = None

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0


@dataclass(frozen=True)
class Link:
    """A laid-out link between two nodes, referenced by id.

    ``y0`` is the attachment height on the source's right edge and ``y1``
    on the target's left edge. ``width`` is the stroke thickness.
    """

    source: int
    target: int
    y0: float
    y1: float
    width: float


class NodeIndex(Mapping[int, Node]):
    """Read-only lookup of nodes by id for a single render."""

    def __init__(self, nodes: Iterable[Node]):
        self._nodes: dict[int, Node] = {}
        for node in nodes:
            if node.id in self._nodes:
                raise DuplicateNodeError(node.id)
            self._nodes[node.id] = node

    def __getitem__(self, node_id: int) -> Node:
        return self._nodes[node_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def resolve(self, link: Link) -> tuple[Node, Node] | None:
        """Return the (source, target) nodes of a link, or None if either is missing."""
        source = self._nodes.get(link.source)
        target = self._nodes.get(link.target)
        if source is None or target is None:
            return None
        return source, target

    def missing_endpoints(self, link: Link) -> list[int]:
        return [
            node_id
            for node_id in (link.source, link.target)
            if node_id not in self._nodes
        ]
