"""Tests for the TopicTalk facade."""

import pytest
import yaml

from topictalk.config.models import TopicTalkConfig
from topictalk.core.errors import ConfigError
from topictalk.framework import TopicTalk
from topictalk.graph.loader import GraphLoader
from topictalk.patterns.base import NullPreProcessor
from topictalk.patterns.responder import PatternResponder


def test_defaults_to_null_preprocessor(city_graph):
    talk = TopicTalk(TopicTalkConfig(), city_graph)
    assert isinstance(talk.session.preprocessor, NullPreProcessor)
    assert talk.respond("paris").startswith("Paris is the capital of France.")


def test_from_config_loads_patterns(paris_dir):
    talk = TopicTalk.from_config(paris_dir / "topictalk.yaml")

    assert isinstance(talk.session.preprocessor, PatternResponder)
    assert len(talk.graph) == 5
    assert talk.graph.root.name == "Paris"


def test_from_config_accepts_directory(paris_dir):
    assert TopicTalk.from_config(paris_dir).graph.root.name == "Paris"


def test_from_config_without_graph_fails(tmp_path):
    path = tmp_path / "topictalk.yaml"
    path.write_text("dialogue:\n  novelty_amount: 2\n")

    with pytest.raises(ConfigError, match="No graph file configured"):
        TopicTalk.from_config(path)


def test_graph_path_override(tmp_path, city_graph):
    graph_path = tmp_path / "city.yaml"
    GraphLoader.dump(city_graph, graph_path)
    config_path = tmp_path / "topictalk.yaml"
    config_path.write_text("")

    talk = TopicTalk.from_config(config_path, graph_path=graph_path)

    assert talk.graph.get_feature_names() == ["Paris", "Louvre", "Seine"]


def test_save_is_noop_without_persist(paris_dir):
    talk = TopicTalk.from_config(paris_dir / "topictalk.yaml")
    before = (paris_dir / "graph.yaml").read_text()

    talk.respond("where is the louvre?")

    assert talk.save() is False
    assert (paris_dir / "graph.yaml").read_text() == before


def test_save_persists_discussion_counts(paris_dir):
    config_path = paris_dir / "topictalk.yaml"
    data = yaml.safe_load(config_path.read_text())
    data["graph"]["persist"] = True
    config_path.write_text(yaml.safe_dump(data))

    talk = TopicTalk.from_config(config_path)
    talk.respond("where is the louvre?")
    assert talk.save() is True

    reloaded = GraphLoader.load(paris_dir / "graph.yaml")
    assert reloaded.get_feature("Louvre").discussed_amount == 1
    assert reloaded.get_feature("Paris").discussed_amount == 0
