"""Structured representation of a parsed utterance."""

from dataclasses import dataclass
from enum import Enum

from topictalk.graph.direction import Direction
from topictalk.graph.feature import Feature


class Question(str, Enum):
    """Kinds of question the parser recognizes."""

    WHAT = "what"
    WHERE = "where"
    WHEN = "when"


@dataclass(frozen=True)
class Query:
    """Topic, optional question kind and optional direction of an utterance."""

    topic: Feature
    question: Question | None = None
    direction: Direction | None = None

    @property
    def is_question(self) -> bool:
        return self.question is not None

    @property
    def has_direction(self) -> bool:
        return self.direction is not None

    def __str__(self) -> str:
        question = self.question.name if self.question else "none"
        direction = self.direction.name if self.direction else "none"
        return f"Topic: {self.topic.name}\nQuestion type: {question}\nDirection specified: {direction}"
