"""Exceptions raised by sankeyplot."""

from __future__ import annotations


class SankeyError(Exception):
    """Base class for sankeyplot errors."""


class InvalidColorError(SankeyError, ValueError):
    """Raised when a color value cannot be parsed."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid color value: {value!r}")
        self.value = value


class StyleError(SankeyError, ValueError):
    """Raised when a style option is out of range."""


class DuplicateNodeError(SankeyError, ValueError):
    """Raised when two nodes in one render share an id."""

    def __init__(self, node_id: int) -> None:
        super().__init__(f"Duplicate node id {node_id}")
        self.node_id = node_id
