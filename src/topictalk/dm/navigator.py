"""Topic navigation and novelty tracking.

When the user gives no specific input the navigator picks the next topic,
preferring unexplored neighbors of the current topic, and annotates every
reply with how fresh the topic is.
"""

import logging
from dataclasses import dataclass, field

from topictalk.core.constants import DEFAULT_NOVELTY_AMOUNT
from topictalk.graph.feature import Feature, FeatureGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoveltyInfo:
    """Freshness of a topic at a given turn."""

    topic: str
    score: float
    discussed_amount: int
    suggestions: tuple[str, ...] = field(default_factory=tuple)

    @property
    def annotation(self) -> str:
        # No colons: the annotation is embedded in colon-delimited replies
        text = f"[novelty {self.score:.2f}"
        if self.suggestions:
            text += f"; try {', '.join(self.suggestions)}"
        return text + "]"

    def __str__(self) -> str:
        return self.annotation


class TopicNavigator:
    """Choose topics and score their novelty.

    Novelty combines two signals: how often a topic was discussed
    (``discussed_amount``) and how many turns ago it was last active,
    saturating after ``novelty_amount`` turns.
    """

    def __init__(self, novelty_amount: int = DEFAULT_NOVELTY_AMOUNT):
        if novelty_amount < 1:
            raise ValueError("novelty_amount must be at least 1")
        self.novelty_amount = novelty_amount
        self.last_turn: dict[str, int] = {}
        self.current_topic_novelty: float = -1.0

    def record(self, topic: Feature, turn: int) -> None:
        """Remember that ``topic`` became active at ``turn``."""
        self.last_turn[topic.name] = turn

    def recency(self, topic: Feature, turn: int) -> float:
        last = self.last_turn.get(topic.name)
        if last is None:
            return 1.0
        return max(0.0, min(1.0, (turn - last) / self.novelty_amount))

    def novelty_score(self, topic: Feature, turn: int) -> float:
        return self.recency(topic, turn) / (1 + topic.discussed_amount)

    def _neighbor_candidates(self, graph: FeatureGraph, current: Feature) -> list[Feature]:
        seen = {current.name}
        candidates = []
        for target, _ in graph.neighbors(current):
            if target.name not in seen:
                seen.add(target.name)
                candidates.append(target)
        return candidates

    def _best(self, candidates: list[Feature], turn: int) -> Feature | None:
        best: Feature | None = None
        best_score = 0.0
        for candidate in candidates:
            score = self.novelty_score(candidate, turn)
            if score > best_score:
                best, best_score = candidate, score
        return best

    def next_topic(self, graph: FeatureGraph, current: Feature, turn: int) -> Feature:
        """Pick the topic to talk about when the user gave no input.

        Order of preference: neighbors of ``current`` not active within the
        novelty window, then any such topic, then the highest-scoring neighbor
        or topic, and finally ``current`` itself.
        """
        neighbors = self._neighbor_candidates(graph, current)
        taken = {current.name} | {f.name for f in neighbors}
        others = [f for f in graph if f.name not in taken]

        def fresh(features: list[Feature]) -> list[Feature]:
            return [f for f in features if self.recency(f, turn) >= 1.0]

        for candidates in (fresh(neighbors), fresh(others), neighbors + others):
            choice = self._best(candidates, turn)
            if choice is not None:
                return choice

        logger.debug(f"No fresh topic reachable from '{current.name}', staying")
        return current

    def novelty(self, graph: FeatureGraph, topic: Feature, turn: int) -> NoveltyInfo:
        """Score ``topic`` and suggest up to ``novelty_amount`` fresher topics."""
        score = self.novelty_score(topic, turn)
        self.current_topic_novelty = score

        ordered = self._neighbor_candidates(graph, topic)
        names = {f.name for f in ordered} | {topic.name}
        ordered.extend(f for f in graph if f.name not in names)

        # Stable sort keeps neighbors ahead of other topics on equal scores
        scored = [(self.novelty_score(f, turn), f.name) for f in ordered]
        scored = [item for item in scored if item[0] > 0]
        scored.sort(key=lambda item: item[0], reverse=True)
        suggestions = tuple(name for _, name in scored[: self.novelty_amount])

        return NoveltyInfo(
            topic=topic.name,
            score=round(score, 4),
            discussed_amount=topic.discussed_amount,
            suggestions=suggestions,
        )
