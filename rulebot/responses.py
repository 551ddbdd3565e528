"""Response resolution: exact match, keyword fallback, default reply"""

import logging
from typing import NamedTuple, Optional

from . import config
from .clock import Clock, SystemClock
from .knowledge import KnowledgeBase, ResponseEntry

logger = logging.getLogger(__name__)

# Match stages
EXACT = "exact"
KEYWORD = "keyword"
DEFAULT = "default"


class Match(NamedTuple):
    """Outcome of resolving one input"""

    stage: str
    response: str
    trigger: Optional[str] = None
    entry: Optional[ResponseEntry] = None


def normalize(text: str) -> str:
    """Trim surrounding whitespace and lowercase. No other cleanup."""
    return text.strip().lower()


class ResponseResolver:
    """
    Maps user text to exactly one reply.

    Decision chain in match():
      1. Exact match on the whole normalized input (dynamic entries are
         rendered from the clock)
      2. First trigger contained in the input, in knowledge-base order
         (stored response, even for dynamic entries)
      3. Fallback reply
    """

    def __init__(self, knowledge_base: KnowledgeBase, clock: Optional[Clock] = None):
        self.knowledge_base = knowledge_base
        self.clock = clock or SystemClock()

    def match(self, text: str) -> Match:
        query = normalize(text)

        # ── 1. Exact match ─────────────────────────────────────────────────
        entry = self.knowledge_base.lookup(query)
        if entry is not None:
            response = entry.render(self.clock) if entry.is_dynamic else entry.response
            logger.debug(f"Exact match on {query!r}")
            return Match(EXACT, response, query, entry)

        # ── 2. Keyword fallback ────────────────────────────────────────────
        for trigger, entry in self.knowledge_base.entries():
            if trigger in query:
                logger.debug(f"Keyword match on {trigger!r} in {query[:50]!r}")
                return Match(KEYWORD, entry.response, trigger, entry)

        # ── 3. Default ─────────────────────────────────────────────────────
        logger.debug(f"No match for {query[:50]!r}")
        return Match(DEFAULT, config.FALLBACK_RESPONSE)

    def resolve(self, text: str) -> str:
        """Reply for `text`; never fails"""
        return self.match(text).response
