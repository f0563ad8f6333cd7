"""Rule-based query parser.

Turns a free-text utterance into a :class:`Query`: the main topic is the
longest known topic name found in the text, and the question kind and
direction come from an ordered list of keyword tests.
"""

import logging
from typing import Literal

from topictalk.du.normalizer import normalize, strip
from topictalk.du.query import Query, Question
from topictalk.graph.direction import DIRECTION_WORDS, RELATION_TABLE, Direction
from topictalk.graph.feature import Feature, FeatureGraph

logger = logging.getLogger(__name__)

DirectionPolicy = Literal["last_match", "longest_match"]

# WHERE questions that ask for the host of an event
HOSTED_AT_MARKERS: tuple[str, ...] = ("was_hosted_at", "hosted at")


class QueryParser:
    """Classify utterances against the topics of a feature graph.

    Args:
        graph: Graph whose feature names are the known topics
        direction_policy: ``last_match`` keeps the last word of
            ``DIRECTION_WORDS`` found in the text; ``longest_match`` keeps the
            longest word found (first in scan order on ties). Both resolve
            "northwest" over "north"; they differ when an utterance holds two
            unrelated direction words.
    """

    def __init__(self, graph: FeatureGraph, direction_policy: DirectionPolicy = "last_match"):
        if direction_policy not in ("last_match", "longest_match"):
            raise ValueError(f"Unknown direction policy: {direction_policy}")
        self.graph = graph
        self.direction_policy = direction_policy
        self.candidate_topic: Feature | None = None
        self.topic_names: list[tuple[str, str]] = []
        self.refresh()

    def refresh(self) -> None:
        """Rebuild the (match key, feature name) table from the graph."""
        self.topic_names = [(strip(name.lower()), name) for name in self.graph.get_feature_names()]

    def find_topic(self, text: str) -> Feature | None:
        """Return the feature whose name is the longest substring of ``text``.

        Ties keep the first name in graph order.
        """
        haystacks = (normalize(text), strip(text.lower()))
        best: str | None = None
        best_len = 0
        for key, name in self.topic_names:
            if not key:
                continue
            if any(key in haystack for haystack in haystacks) and len(key) > best_len:
                best, best_len = name, len(key)
        return None if best is None else self.graph.get_feature(best)

    def match_direction(self, text: str) -> Direction | None:
        """Scan ``text`` for direction words under the configured policy."""
        found: str | None = None
        for word in DIRECTION_WORDS:
            if word not in text:
                continue
            if self.direction_policy == "last_match" or found is None or len(word) > len(found):
                found = word
        return None if found is None else RELATION_TABLE[found]

    def classify(self, text: str) -> tuple[Question | None, Direction | None]:
        """Return the question kind and direction asked about in ``text``."""
        text = normalize(text)
        if "where" in text:
            if any(marker in text for marker in HOSTED_AT_MARKERS):
                return Question.WHERE, Direction.WAS_HOSTED_AT
            return Question.WHERE, None
        if "when" in text:
            return Question.WHEN, None
        if "what" in text or "?" in text:
            return Question.WHAT, self.match_direction(text)
        return None, None

    def build_query(self, text: str) -> Query | None:
        """Parse ``text`` into a Query, or None if it names no known topic.

        The resolved topic is kept in ``candidate_topic``; callers commit it
        as the active topic only once their own turn succeeds.
        """
        feature = self.find_topic(text)
        if feature is None:
            logger.debug(f"No known topic in input: {text!r}")
            return None
        self.candidate_topic = feature

        question, direction = self.classify(text)
        query = Query(topic=feature, question=question, direction=direction)
        logger.debug(f"Parsed query: {query}")
        return query
