"""High-level API.

    from topictalk import TopicTalk

    talk = TopicTalk.from_config("examples/paris/topictalk.yaml")
    print(talk.respond("where is the louvre?"))
    print(talk.respond(""))  # move on to a fresh topic
    talk.save()
"""

import logging
from pathlib import Path

from topictalk.config.loader import ConfigLoader
from topictalk.config.models import TopicTalkConfig
from topictalk.core.errors import ConfigError
from topictalk.dm.session import DialogueSession
from topictalk.graph.feature import FeatureGraph
from topictalk.graph.loader import GraphLoader
from topictalk.patterns.base import NullPreProcessor, PreProcessor
from topictalk.patterns.responder import PatternResponder

logger = logging.getLogger(__name__)


class TopicTalk:
    """Wires a graph, a canned-response layer and a session from config."""

    def __init__(
        self,
        config: TopicTalkConfig,
        graph: FeatureGraph,
        preprocessor: PreProcessor | None = None,
    ) -> None:
        self.config = config
        self.graph = graph
        if preprocessor is None:
            preprocessor = self._build_preprocessor(config)
        self.session = DialogueSession(
            graph,
            preprocessor=preprocessor,
            settings=config.dialogue,
            messages=config.messages,
        )

    @staticmethod
    def _build_preprocessor(config: TopicTalkConfig) -> PreProcessor:
        if not config.patterns_path:
            return NullPreProcessor()
        return PatternResponder.load(
            config.patterns_path, prefix=config.dialogue.directive_prefix
        )

    @classmethod
    def from_config(
        cls, config_path: str | Path, graph_path: str | Path | None = None
    ) -> "TopicTalk":
        """Load config (and the graph it names, unless ``graph_path`` overrides it)."""
        config = ConfigLoader.load(config_path)
        if graph_path is not None:
            config.graph.path = str(graph_path)
        if not config.graph.path:
            raise ConfigError("No graph file configured (set graph.path)")

        graph = GraphLoader.load(config.graph.path, strict_relations=config.graph.strict_relations)
        logger.info(f"TopicTalk ready with {len(graph)} topics, root '{graph.root.name}'")
        return cls(config, graph)

    def respond(self, message: str, machine_readable: bool = False) -> str:
        """Process one utterance and return the reply."""
        return self.session.respond(message, machine_readable=machine_readable)

    def save(self) -> bool:
        """Persist discussion counts if configured. Returns True when written."""
        if not (self.config.graph.persist and self.config.graph.path):
            return False
        GraphLoader.dump(self.graph, self.config.graph.path)
        return True
