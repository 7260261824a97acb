from dataclasses import dataclass, field

from vaultpress.vault.tree import VaultTree


@dataclass
class MemoryTree(VaultTree):
    """VaultTree over nested dicts: a dict is a directory, str/bytes a file.

    Nodes are (name, value) pairs; the root is ('', files).
    """
    files: dict = field(default_factory=dict)

    @property
    def root(self) -> tuple:
        return ('', self.files)

    def list_children(self, node: tuple) -> list[tuple]:
        return list(node[1].items())

    def is_directory(self, node: tuple) -> bool:
        return isinstance(node[1], dict)

    def name(self, node: tuple) -> str:
        return node[0]

    def read_content(self, node: tuple) -> bytes:
        value = node[1]
        return value.encode('utf-8') if isinstance(value, str) else value
