from __future__ import annotations

from datetime import datetime, timezone

import pytest

from prompt_palette.knowledge.base import default_knowledge_base

FIXED_NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def kb():
    return default_knowledge_base()
