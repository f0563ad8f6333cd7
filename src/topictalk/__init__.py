"""TopicTalk - rule-based dialogue over a small labeled knowledge graph.

Quick start:
    from topictalk import TopicTalk

    talk = TopicTalk.from_config("examples/paris/topictalk.yaml")
    response = talk.respond("what is north of the seine?")
"""

from topictalk.__version__ import __version__
from topictalk.core.errors import ConfigError, GraphError, PreprocessorError, TopicTalkError
from topictalk.dm.session import DialogueSession
from topictalk.du.query import Query, Question
from topictalk.framework import TopicTalk
from topictalk.graph.direction import Direction
from topictalk.graph.feature import Feature, FeatureGraph

__all__ = [
    "__version__",
    "TopicTalk",
    "DialogueSession",
    "Direction",
    "Feature",
    "FeatureGraph",
    "Query",
    "Question",
    "TopicTalkError",
    "ConfigError",
    "GraphError",
    "PreprocessorError",
]
