"""Root test configuration: keep VAULTPRESS_* settings from leaking into tests"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop any VAULTPRESS_<FIELD> variables set in the invoking shell."""
    for name in list(os.environ):
        if name.startswith("VAULTPRESS_"):
            monkeypatch.delenv(name)
