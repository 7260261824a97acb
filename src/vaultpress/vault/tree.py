from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

Node = Any


class VaultTree(ABC):
    """Read-only view of a folder tree; nodes are opaque to the resolver."""

    @property
    @abstractmethod
    def root(self) -> Node:
        raise NotImplementedError

    @abstractmethod
    def list_children(self, node: Node) -> list[Node]:
        """Return the direct children of a directory node, in a stable order."""
        raise NotImplementedError

    @abstractmethod
    def is_directory(self, node: Node) -> bool:
        raise NotImplementedError

    @abstractmethod
    def name(self, node: Node) -> str:
        raise NotImplementedError

    @abstractmethod
    def read_content(self, node: Node) -> bytes:
        """Return the whole content of a file node."""
        raise NotImplementedError
