from datetime import datetime

import pytest

from rulebot.clock import FixedClock
from rulebot.knowledge import (
    DYNAMIC,
    FAREWELL,
    GREETING,
    QUESTION,
    KnowledgeBase,
    ResponseEntry,
    render_time,
)

EXPECTED_ORDER = [
    "hello", "hi", "hey",
    "how are you", "what is your name", "what can you do",
    "time",
    "bye", "exit",
]


def test_build_contains_all_triggers_in_insertion_order(kb):
    assert kb.triggers() == EXPECTED_ORDER
    assert [t for t, _ in kb.entries()] == EXPECTED_ORDER
    assert list(kb) == EXPECTED_ORDER
    assert len(kb) == 9


def test_entries_order_is_stable(kb):
    assert kb.entries() == kb.entries()


def test_lookup_exact(kb):
    entry = kb.lookup("what is your name")
    assert entry.response == "I am a simple AI Chatbot created in Python."
    assert entry.category == QUESTION
    assert not entry.is_dynamic


def test_lookup_missing_and_unnormalized(kb):
    assert kb.lookup("goodbye") is None
    # lookup does not normalize; callers pass normalized keys
    assert kb.lookup("Hello") is None
    assert "hello" in kb
    assert "Hello" not in kb


def test_categories(kb):
    assert kb.lookup("hey").category == GREETING
    assert kb.lookup("exit").category == FAREWELL
    assert kb.lookup("time").category == DYNAMIC


def test_time_entry_is_stamped_at_build(kb):
    entry = kb.lookup("time")
    assert entry.is_dynamic
    assert entry.dynamic == "time"
    assert entry.response == "The current time is 09:05:07."


def test_render_time_uses_24_hour_clock():
    clock = FixedClock(datetime(2024, 1, 1, 21, 4, 3))
    assert render_time(clock) == "The current time is 21:04:03."


def test_entry_render_dynamic(kb):
    clock = FixedClock(datetime(2024, 1, 1, 0, 0, 0))
    assert kb.lookup("time").render(clock) == "The current time is 00:00:00."


def test_entries_are_read_only(kb):
    entry = kb.lookup("hello")
    with pytest.raises(AttributeError):
        entry.response = "changed"
    with pytest.raises(TypeError):
        kb._table["new"] = entry


def test_duplicate_trigger_rejected():
    with pytest.raises(ValueError, match="Duplicate"):
        KnowledgeBase([
            ResponseEntry("hi", "one"),
            ResponseEntry("hi", "two"),
        ])


@pytest.mark.parametrize("trigger", ["", "Hello", " hi", "bye "])
def test_unnormalized_trigger_rejected(trigger):
    with pytest.raises(ValueError):
        KnowledgeBase([ResponseEntry(trigger, "x")])


def test_unknown_dynamic_marker_rejected():
    with pytest.raises(ValueError, match="Unknown dynamic marker"):
        KnowledgeBase([ResponseEntry("date", "x", DYNAMIC, dynamic="date")])


def test_statistics(kb):
    stats = kb.get_statistics()
    assert stats["total_entries"] == 9
    assert stats["by_category"] == {GREETING: 3, QUESTION: 3, DYNAMIC: 1, FAREWELL: 2}
    assert stats["dynamic_triggers"] == ["time"]


def test_to_dict(kb):
    assert kb.lookup("bye").to_dict() == {
        "trigger": "bye",
        "response": "Goodbye! Have a great day.",
        "category": FAREWELL,
        "dynamic": None,
    }


def test_build_without_clock_uses_system_time():
    entry = KnowledgeBase.build().lookup("time")
    assert entry.response.startswith("The current time is ")
