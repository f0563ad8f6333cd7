"""Pre-processor contract for the canned-response layer.

A pre-processor sees every non-empty utterance before the dialogue core. It
either answers on its own (:class:`PassThroughReply`), rewrites the utterance
(:class:`Directive`), or stays silent (``None``).
"""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from topictalk.core.constants import DIRECTIVE_PREFIX


@dataclass(frozen=True)
class PassThroughReply:
    """Reply returned to the user verbatim; the core pipeline is skipped."""

    text: str


@dataclass(frozen=True)
class Directive:
    """Substitute utterance to feed into the core pipeline."""

    payload: str


PreprocessResult = PassThroughReply | Directive | None


@dataclass
class ConversationMemory:
    """Values remembered across turns plus the (utterance, reply) history."""

    values: dict[str, str] = field(default_factory=dict)
    history: list[tuple[str, str]] = field(default_factory=list)

    def remember(self, key: str, value: str) -> None:
        self.values[key] = value

    def recall(self, key: str, default: str | None = None) -> str | None:
        return self.values.get(key, default)

    def add_turn(self, utterance: str, reply: str) -> None:
        self.history.append((utterance, reply))

    @property
    def last_reply(self) -> str | None:
        return self.history[-1][1] if self.history else None


@runtime_checkable
class PreProcessor(Protocol):
    """Protocol that every canned-response layer implements."""

    def process(self, utterance: str, memory: ConversationMemory) -> PreprocessResult:
        """Answer, rewrite or ignore ``utterance``."""
        ...


def interpret_reply(reply: str | None, prefix: str = DIRECTIVE_PREFIX) -> PreprocessResult:
    """Classify a raw text reply of a chat engine.

    Empty replies mean "nothing to say"; replies starting with ``prefix`` are
    directives whose remainder becomes the new, lowercased utterance.
    """
    if not reply:
        return None
    if reply.startswith(prefix):
        return Directive(reply[len(prefix) :].strip().lower())
    return PassThroughReply(reply)


class NullPreProcessor:
    """Pre-processor that never answers."""

    def process(self, utterance: str, memory: ConversationMemory) -> PreprocessResult:
        return None
