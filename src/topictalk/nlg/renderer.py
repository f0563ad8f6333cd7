"""Answer rendering: turn a Query into the sentences of a say-buffer."""

import logging
from collections.abc import Sequence

from topictalk.core.constants import IDK, NO_ANSWER
from topictalk.du.query import Query, Question
from topictalk.graph.direction import Direction, normalize_relation
from topictalk.graph.feature import Feature, FeatureGraph

logger = logging.getLogger(__name__)

# Keyed by the direction as phrased from the subject's side
_RELATION_TEMPLATES: dict[Direction, str] = {
    Direction.CONTAIN: "{subject} contains {neighbor}.",
    Direction.INSIDE: "{subject} is inside {neighbor}.",
    Direction.HOSTED: "{subject} hosted {neighbor}.",
    Direction.WAS_HOSTED_AT: "{subject} was hosted at {neighbor}.",
    Direction.WON: "{subject} won {neighbor}.",
}
_COMPASS_TEMPLATE = "{subject} is {label} of {neighbor}."


def join_and(items: Sequence[str]) -> str:
    """Join items as an English list with an Oxford comma.

    Examples:
        >>> join_and(["A", "B", "C"])
        'A, B, and C'
    """
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return ", ".join(items[:-1]) + ", and " + items[-1]


def upper_first(text: str) -> str:
    return text[:1].upper() + text[1:]


class AnswerRenderer:
    """Render queries over a feature graph into sentences.

    Edge convention for spatial directions: an edge ``A -[north]-> B`` means
    "B is north of A", so from A's vantage the renderer reports the inverse
    ("A is south of B"). Event relations are stored from the subject's side:
    ``City -[hosted]-> Games`` means "City hosted Games".
    """

    def __init__(self, graph: FeatureGraph, idk: str = IDK, no_answer: str = NO_ANSWER):
        self.graph = graph
        self.idk = idk
        self.no_answer = no_answer

    def find_neighbors_by_relation(self, feature: Feature, relation: str) -> list[str]:
        """Names of neighbors joined by ``relation``; an empty relation matches all."""
        wanted = normalize_relation(relation)
        return [
            target.name
            for target, edge in self.graph.neighbors(feature)
            if not wanted or normalize_relation(edge.relation) == wanted
        ]

    def find_directional_neighbors(self, feature: Feature) -> list[tuple[str, Direction]]:
        return [
            (target.name, edge.direction)
            for target, edge in self.graph.neighbors(feature)
            if edge.direction is not None
        ]

    def speak_neighbor_relations(self, feature: Feature) -> list[str]:
        """One sentence per directional neighbor; the first names the topic."""
        sentences = []
        for i, (neighbor, direction) in enumerate(self.find_directional_neighbors(feature)):
            subject = feature.name if i == 0 else "It"
            phrased = direction.invert() if direction.is_spatial else direction
            template = _RELATION_TEMPLATES.get(phrased, _COMPASS_TEMPLATE)
            sentences.append(
                template.format(subject=subject, label=phrased.label, neighbor=neighbor)
            )
        return sentences

    def say_about(self, feature: Feature) -> list[str]:
        """Literal speak-lines followed by neighbor relations, else the name."""
        stuff = list(feature.speaks)
        stuff.extend(self.speak_neighbor_relations(feature))
        return stuff or [feature.name]

    def render(self, query: Query | None) -> list[str]:
        """Build the say-buffer for ``query``. Never returns an empty list."""
        if query is None:
            return [self.no_answer]

        if not query.is_question:
            output = self.say_about(query.topic)
        elif query.question is Question.WHAT:
            output = self._render_what(query)
        elif query.question is Question.WHERE:
            output = self._render_where(query)
        else:
            # WHEN questions have no temporal data to draw on
            output = []

        if not output:
            logger.debug(f"Nothing to say for query on '{query.topic.name}'")
            return [self.idk]
        return output

    def _render_what(self, query: Query) -> list[str]:
        topic = query.topic
        if query.direction is None:
            return self.say_about(topic)

        if query.direction is Direction.WON:
            return self._render_won(topic)

        neighbors = self.find_neighbors_by_relation(topic, query.direction.label)
        if not neighbors:
            return []
        if query.direction is Direction.HOSTED:
            return [f"{topic.name} hosted {join_and(neighbors)}."]

        verb = "is" if len(neighbors) == 1 else "are"
        return [
            f"{upper_first(query.direction.label)} of {topic.name} {verb} {join_and(neighbors)}"
        ]

    def _render_won(self, topic: Feature) -> list[str]:
        winners = self.find_neighbors_by_relation(topic, Direction.WON.label)
        if winners:
            return [f"{topic.name} won {join_and(winners)}."]

        # The topic is the event: find neighbors that point back with "won"
        output = []
        for neighbor_name in self.find_neighbors_by_relation(topic, ""):
            neighbor = self.graph.get_feature(neighbor_name)
            for target, edge in self.graph.neighbors(neighbor):
                if target.name == topic.name and edge.direction is Direction.WON:
                    output.append(f"{neighbor_name} won {topic.name}.")
        return output

    def _render_where(self, query: Query) -> list[str]:
        topic = query.topic
        if query.direction is Direction.WAS_HOSTED_AT:
            hosts = self.find_neighbors_by_relation(topic, Direction.WAS_HOSTED_AT.label)
            return [f"{topic.name} was hosted at {host}." for host in hosts]
        return self.speak_neighbor_relations(topic)
