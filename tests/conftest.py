"""Shared fixtures for TopicTalk tests.

Graphs are built in memory; `paris_dir` copies the bundled example for end-to-end tests.
"""

import shutil
from pathlib import Path

import pytest

from topictalk.graph.feature import FeatureGraph


@pytest.fixture
def city_graph() -> FeatureGraph:
    """Paris with two speak lines and a museum inside it, plus an isolated river."""
    graph = FeatureGraph()
    graph.add_feature(
        "Paris",
        speaks=["Paris is the capital of France.", "It sits on the Seine."],
    )
    graph.add_feature("Louvre", speaks=["The Louvre is a museum."])
    graph.add_feature("Seine")
    graph.add_edge("Paris", "Louvre", "inside")
    graph.add_edge("Louvre", "Paris", "contain")
    return graph


@pytest.fixture
def games_graph() -> FeatureGraph:
    """An event, its winner and its host."""
    graph = FeatureGraph()
    graph.add_feature("Games")
    graph.add_feature("Alice")
    graph.add_feature("City")
    graph.add_feature("Olympics")
    graph.add_edge("Games", "Alice", "won")
    graph.add_edge("Alice", "Games", "competed in")
    graph.add_edge("City", "Olympics", "hosted")
    graph.add_edge("Olympics", "City", "was_hosted_at")
    return graph


@pytest.fixture
def compass_graph() -> FeatureGraph:
    """A square with landmarks on several sides."""
    graph = FeatureGraph()
    graph.add_feature("Square", speaks=["The square is paved."])
    graph.add_feature("Church")
    graph.add_feature("Market")
    graph.add_feature("Fountain")
    graph.add_edge("Square", "Church", "north")
    graph.add_edge("Square", "Market", "north")
    graph.add_edge("Square", "Fountain", "southwest")
    return graph


@pytest.fixture
def paris_dir(tmp_path):
    """A private copy of the bundled Paris example (config, graph and patterns)."""
    source = Path(__file__).resolve().parents[1] / "examples" / "paris"
    target = tmp_path / "paris"
    shutil.copytree(source, target)
    return target
