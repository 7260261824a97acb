"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
# The Sunless Citadel

Read the following aloud.

> The ravine yawns before you.

## Encounters

| Room | Monster | XP |
|------|---------|----|
| 1 | **Kobold** | 25 |
| 2 | *Giant rat* | 10 |

Treasure is kept in room 2.
Roll for initiative.
"""

SAMPLE_FM_MD = """\
---
title: Session 1
tags: [campaign, dnd]
---

# Session 1

Body content.
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture():
    return SAMPLE_FM_MD
