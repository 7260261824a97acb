from dataclasses import dataclass
from pathlib import Path

from vaultpress.vault.tree import VaultTree


@dataclass
class LocalTree(VaultTree):
    """VaultTree over a directory on the local filesystem."""
    path: Path

    def __post_init__(self):
        self.path = Path(self.path).expanduser()

    @property
    def root(self) -> Path:
        return self.path

    def list_children(self, node: Path) -> list[Path]:
        return sorted(node.iterdir(), key=lambda p: p.name)

    def is_directory(self, node: Path) -> bool:
        return node.is_dir()

    def name(self, node: Path) -> str:
        return node.name

    def read_content(self, node: Path) -> bytes:
        return node.read_bytes()
