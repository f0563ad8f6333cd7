"""Feature graph: topics and the labeled edges between them.

Features live in an arena owned by the graph and edges refer to their target
by index, so cyclic relations (CONTAIN/INSIDE pairs, mutual neighbors) never
create ownership cycles.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from topictalk.core.errors import GraphError
from topictalk.graph.direction import Direction, parse_relation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """Outgoing labeled edge of a feature."""

    target: int
    relation: str
    direction: Direction | None = None


@dataclass
class Feature:
    """A topic node the dialogue can discuss."""

    name: str
    index: int
    discussed_amount: int = 0
    speaks: list[str] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def __str__(self) -> str:
        return self.name


class FeatureGraph:
    """Name-indexed arena of features with a designated root."""

    def __init__(self) -> None:
        self._features: list[Feature] = []
        self._index: dict[str, int] = {}
        self._root: int | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_feature(
        self,
        name: str,
        speaks: Iterable[str] = (),
        discussed_amount: int = 0,
    ) -> Feature:
        """Add a new feature. The first feature added becomes the root."""
        if not name:
            raise GraphError("Feature name must not be empty")
        if name in self._index:
            raise GraphError(f"Duplicate feature name: {name}")
        if discussed_amount < 0:
            raise GraphError(f"Discussed amount of '{name}' must not be negative")

        feature = Feature(
            name=name,
            index=len(self._features),
            discussed_amount=discussed_amount,
            speaks=list(speaks),
        )
        self._features.append(feature)
        self._index[name] = feature.index
        if self._root is None:
            self._root = feature.index
        return feature

    def add_edge(self, source: str, target: str, relation: str) -> Edge:
        """Add a labeled edge from ``source`` to ``target``."""
        src = self.get_feature(source)
        dst = self.get_feature(target)
        edge = Edge(target=dst.index, relation=relation, direction=parse_relation(relation))
        src.edges.append(edge)
        return edge

    def set_root(self, name: str) -> None:
        """Make the feature called ``name`` the root.

        Raises:
            GraphError: If no feature has that name
        """
        self._root = self.get_feature_index(name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def root(self) -> Feature:
        """Feature the dialogue starts from (the first added unless overridden)."""
        if self._root is None:
            raise GraphError("Graph has no features")
        return self._features[self._root]

    def get_feature(self, name: str) -> Feature:
        """Return the feature called ``name`` (case-sensitive)."""
        feature = self.find_feature(name)
        if feature is None:
            raise GraphError(f"Unknown feature: {name}")
        return feature

    def find_feature(self, name: str) -> Feature | None:
        """Like :meth:`get_feature` but returns None on a miss."""
        index = self._index.get(name)
        return None if index is None else self._features[index]

    def get_feature_index(self, name: str) -> int:
        """Return the arena index of ``name``.

        Args:
            name: Exact feature name

        Returns:
            Stable index, as used in machine-readable replies

        Raises:
            GraphError: If no feature has that name
        """
        try:
            return self._index[name]
        except KeyError:
            raise GraphError(f"Unknown feature: {name}") from None

    def feature_at(self, index: int) -> Feature:
        """Return the feature stored at ``index``."""
        if not 0 <= index < len(self._features):
            raise GraphError(f"No feature at index {index}")
        return self._features[index]

    def get_feature_names(self) -> list[str]:
        """Feature names in insertion order."""
        return [f.name for f in self._features]

    def neighbors(self, feature: Feature) -> list[tuple[Feature, Edge]]:
        """Resolve the outgoing edges of ``feature`` to (target, edge) pairs."""
        return [(self._features[edge.target], edge) for edge in feature.edges]

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self._features)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_discussed_amount(self, name: str, amount: int) -> None:
        """Persist the discussion count of a feature."""
        if amount < 0:
            raise GraphError(f"Discussed amount of '{name}' must not be negative")
        self.get_feature(name).discussed_amount = amount

    def mark_discussed(self, feature: Feature) -> int:
        """Increment the discussion count of ``feature`` and return it."""
        self.set_discussed_amount(feature.name, feature.discussed_amount + 1)
        return feature.discussed_amount

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, strict_relations: bool = False) -> None:
        """Check edge targets and relation labels.

        Raises:
            GraphError: If an edge points outside the arena, or, with
                ``strict_relations``, if a relation label is not a known
                direction.
        """
        unknown: set[str] = set()
        for feature in self._features:
            for edge in feature.edges:
                if not 0 <= edge.target < len(self._features):
                    raise GraphError(
                        f"Edge from '{feature.name}' points to missing index {edge.target}"
                    )
                if edge.direction is None:
                    unknown.add(edge.relation)

        if not unknown:
            return
        labels = ", ".join(sorted(unknown))
        if strict_relations:
            raise GraphError(f"Unknown relation labels: {labels}")
        logger.warning(f"Relations without a direction (ignored in directional answers): {labels}")
