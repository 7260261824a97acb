"""Shared fixtures for vault unit tests"""

import pytest

from vaultpress.vault.memory_tree import MemoryTree


@pytest.fixture(name="vault")
def vault_fixture():
    return MemoryTree({
        "Index.md": "# Index",
        "Campaigns": {
            "Sessions": {
                "Session 1.md": "# Session 1",
                "Session 2.md": "# Session 2",
            },
            "NPCs.md": "# NPCs",
        },
        "Archive": {
            "Index.md": "# Old index",
        },
    })
