"""Knowledge graph of topics and directional relations."""

from topictalk.graph.direction import (
    DIRECTION_WORDS,
    Direction,
    invert,
    normalize_relation,
    parse_relation,
)
from topictalk.graph.feature import Edge, Feature, FeatureGraph
from topictalk.graph.loader import GraphLoader

__all__ = [
    "Direction",
    "DIRECTION_WORDS",
    "invert",
    "normalize_relation",
    "parse_relation",
    "Edge",
    "Feature",
    "FeatureGraph",
    "GraphLoader",
]
