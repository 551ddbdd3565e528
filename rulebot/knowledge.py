"""Knowledge base module: the fixed trigger -> response table"""

import logging
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple

from . import config
from .clock import Clock, SystemClock

logger = logging.getLogger(__name__)

# Entry categories
GREETING = "greeting"
QUESTION = "question"
DYNAMIC = "dynamic"
FAREWELL = "farewell"


def render_time(clock: Clock) -> str:
    """Current time as a full sentence, e.g. 'The current time is 14:05:09.'"""
    stamp = clock.now().strftime(config.TIME_FORMAT)
    return config.TIME_RESPONSE_TEMPLATE.format(time=stamp)


# Dynamic marker -> renderer
DYNAMIC_RENDERERS: Dict[str, Callable[[Clock], str]] = {
    "time": render_time,
}


class ResponseEntry(NamedTuple):
    """
    One trigger and the response it produces.

    Static entries return `response` verbatim. Dynamic entries name a
    renderer in `dynamic` and still keep a stored `response`, which is what
    keyword matches return.
    """

    trigger: str
    response: str
    category: str = QUESTION
    dynamic: Optional[str] = None

    @property
    def is_dynamic(self) -> bool:
        return self.dynamic is not None

    def render(self, clock: Clock) -> str:
        """Compute the live response for a dynamic entry"""
        return DYNAMIC_RENDERERS[self.dynamic](clock)

    def to_dict(self) -> Dict:
        return {
            "trigger": self.trigger,
            "response": self.response,
            "category": self.category,
            "dynamic": self.dynamic,
        }


class KnowledgeBase:
    """
    Read-only mapping of trigger to ResponseEntry.

    Entries enumerate in insertion order, which is the precedence of the
    keyword fallback scan.
    """

    def __init__(self, entries: Iterable[ResponseEntry]):
        table: Dict[str, ResponseEntry] = {}
        for entry in entries:
            trigger = entry.trigger
            if not trigger or trigger != trigger.strip().lower():
                raise ValueError(f"Trigger must be non-empty, trimmed and lowercase: {trigger!r}")
            if trigger in table:
                raise ValueError(f"Duplicate trigger: {trigger!r}")
            if entry.is_dynamic and entry.dynamic not in DYNAMIC_RENDERERS:
                raise ValueError(f"Unknown dynamic marker {entry.dynamic!r} for trigger {trigger!r}")
            table[trigger] = entry

        self._table = MappingProxyType(table)
        self._entries: Tuple[Tuple[str, ResponseEntry], ...] = tuple(table.items())

    @classmethod
    def build(cls, clock: Optional[Clock] = None) -> "KnowledgeBase":
        """Build the compiled-in knowledge base"""
        clock = clock or SystemClock()
        kb = cls([
            # Greetings
            ResponseEntry("hello", "Hi there! How can I assist you?", GREETING),
            ResponseEntry("hi", "Hello! What can I do for you?", GREETING),
            ResponseEntry("hey", "Hey! How's it going?", GREETING),

            # Common questions
            ResponseEntry("how are you", "I'm just a program, but I'm doing great! Thanks for asking."),
            ResponseEntry("what is your name", "I am a simple AI Chatbot created in Python."),
            ResponseEntry(
                "what can you do",
                "I can answer some frequently asked questions. Try asking me about my name or the time.",
            ),

            # Dynamic responses (stored text is stamped once, at build time)
            ResponseEntry("time", render_time(clock), DYNAMIC, dynamic="time"),

            # Farewells
            ResponseEntry("bye", "Goodbye! Have a great day.", FAREWELL),
            ResponseEntry("exit", "Farewell! Feel free to chat again anytime.", FAREWELL),
        ])
        logger.info(f"Built knowledge base with {len(kb)} entries")
        return kb

    def lookup(self, trigger: str) -> Optional[ResponseEntry]:
        """Exact-match retrieval by normalized trigger"""
        return self._table.get(trigger)

    def entries(self) -> Tuple[Tuple[str, ResponseEntry], ...]:
        """All (trigger, entry) pairs in stable enumeration order"""
        return self._entries

    def triggers(self) -> List[str]:
        return [trigger for trigger, _ in self._entries]

    def get_statistics(self) -> Dict:
        """Get knowledge base statistics"""
        by_category: Dict[str, int] = {}
        for _, entry in self._entries:
            by_category[entry.category] = by_category.get(entry.category, 0) + 1

        return {
            "total_entries": len(self._entries),
            "by_category": by_category,
            "dynamic_triggers": [t for t, e in self._entries if e.is_dynamic],
        }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, trigger) -> bool:
        return trigger in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self.triggers())
