from datetime import datetime

import pytest

from rulebot import FixedClock, KnowledgeBase, ResponseResolver


@pytest.fixture
def build_clock():
    """Clock used when the knowledge base stamps its stored time text"""
    return FixedClock(datetime(2024, 1, 1, 9, 5, 7))


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 1, 1, 14, 30, 0))


@pytest.fixture
def kb(build_clock):
    return KnowledgeBase.build(build_clock)


@pytest.fixture
def resolver(kb, clock):
    return ResponseResolver(kb, clock)
