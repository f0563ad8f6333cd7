"""Canned-response layer that runs before the dialogue core."""

from topictalk.patterns.base import (
    ConversationMemory,
    Directive,
    NullPreProcessor,
    PassThroughReply,
    PreprocessResult,
    PreProcessor,
    interpret_reply,
)
from topictalk.patterns.responder import PatternResponder, PatternRule

__all__ = [
    "ConversationMemory",
    "Directive",
    "NullPreProcessor",
    "PassThroughReply",
    "PatternResponder",
    "PatternRule",
    "PreProcessor",
    "PreprocessResult",
    "interpret_reply",
]
