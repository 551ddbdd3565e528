"""rulebot — a small rule-based chatbot with a fixed knowledge base"""

__version__ = "0.1.0"
__author__ = "rulebot contributors"
__powered_by__ = "Exact and keyword matching"

from .clock import Clock, SystemClock, FixedClock
from .knowledge import KnowledgeBase, ResponseEntry
from .responses import Match, ResponseResolver, normalize

__all__ = [
    "Clock",
    "SystemClock",
    "FixedClock",
    "KnowledgeBase",
    "ResponseEntry",
    "Match",
    "ResponseResolver",
    "normalize",
]
