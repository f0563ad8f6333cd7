"""Dialogue session: the turn state machine.

One session holds one conversation. Each call to :meth:`DialogueSession.respond`
consumes an utterance and returns exactly one reply string; recoverable
conditions (unknown topic, exhausted buffer, nothing to say) are turned into
fixed sentences instead of exceptions.
"""

import logging

from topictalk.config.models import DialogueSettings, MessagesConfig
from topictalk.core.constants import MACHINE_REPLY_TEMPLATE
from topictalk.core.errors import GraphError
from topictalk.dm.buffer import PaginatedBuffer
from topictalk.dm.navigator import NoveltyInfo, TopicNavigator
from topictalk.du.normalizer import normalize
from topictalk.du.parser import QueryParser
from topictalk.graph.feature import Feature, FeatureGraph
from topictalk.nlg.renderer import AnswerRenderer
from topictalk.observability.logging import ContextLogger
from topictalk.patterns.base import (
    ConversationMemory,
    Directive,
    NullPreProcessor,
    PassThroughReply,
    PreProcessor,
)

logger = logging.getLogger(__name__)
context_logger = ContextLogger(__name__)


class DialogueSession:
    """Orchestrates parser, renderer and navigator across turns."""

    def __init__(
        self,
        graph: FeatureGraph,
        preprocessor: PreProcessor | None = None,
        settings: DialogueSettings | None = None,
        messages: MessagesConfig | None = None,
        navigator: TopicNavigator | None = None,
    ):
        self.graph = graph
        self.settings = settings or DialogueSettings()
        self.messages = messages or MessagesConfig()
        self.preprocessor: PreProcessor = preprocessor or NullPreProcessor()
        self.navigator = navigator or TopicNavigator(self.settings.novelty_amount)
        self.parser = QueryParser(graph, direction_policy=self.settings.direction_policy)
        self.renderer = AnswerRenderer(
            graph, idk=self.messages.idk, no_answer=self.messages.no_answer
        )
        self.memory = ConversationMemory()

        self.topic: Feature | None = None
        self.buffer = PaginatedBuffer.empty()
        self.turn = 1

    @property
    def novelty_amount(self) -> int:
        return self.navigator.novelty_amount

    @property
    def history(self) -> list[tuple[str, str]]:
        return self.memory.history

    def respond(self, utterance: str | None, machine_readable: bool = False) -> str:
        """Consume one utterance and return one reply."""
        raw = (utterance or "").strip().lower()
        text = raw

        if text:
            result = self.preprocessor.process(text, self.memory)
            if isinstance(result, PassThroughReply):
                self.memory.add_turn(raw, result.text)
                return result.text
            if isinstance(result, Directive):
                logger.debug(f"Canned layer rewrote {text!r} as {result.payload!r}")
                text = result.payload

        text = normalize(text)
        topic = self.topic or self.graph.root
        self.topic = topic

        if not text:
            branch = "next_topic"
            answer, novelty = self._move_on(topic)
        elif "tell" in text and "more" in text:
            branch = "tell_more"
            answer, novelty = self._tell_more(topic)
        else:
            branch = "query"
            answer, novelty = self._answer_query(text)

        active = self.topic or topic
        context_logger.with_context(turn=self.turn).debug(
            f"Turn {self.turn} [{branch}] topic={active.name!r}"
        )
        self.turn += 1

        reply = self._format_reply(answer, novelty, active, machine_readable)
        self.memory.add_turn(raw, reply)
        return reply

    # ------------------------------------------------------------------
    # Branches
    # ------------------------------------------------------------------

    def _mark_discussed(self, feature: Feature) -> None:
        try:
            self.graph.mark_discussed(feature)
        except GraphError as e:
            logger.error(f"Could not record discussion of '{feature.name}': {e}", exc_info=True)
            raise

    def _activate(self, feature: Feature, lines: list[str]) -> str:
        """Make ``feature`` the active topic with a fresh buffer; return its first line."""
        self._mark_discussed(feature)
        self.navigator.record(feature, self.turn)
        self.topic = feature
        self.buffer = PaginatedBuffer.of(lines)
        line, self.buffer = self.buffer.advance()
        return line or ""

    def _move_on(self, current: Feature) -> tuple[str, NoveltyInfo]:
        next_topic = self.navigator.next_topic(self.graph, current, self.turn)
        novelty = self.navigator.novelty(self.graph, next_topic, self.turn)
        answer = self._activate(next_topic, self.renderer.say_about(next_topic))
        return answer, novelty

    def _tell_more(self, topic: Feature) -> tuple[str, NoveltyInfo]:
        self._mark_discussed(topic)
        line, self.buffer = self.buffer.advance()
        novelty = self.navigator.novelty(self.graph, topic, self.turn)
        return (self.messages.exhausted if line is None else line), novelty

    def _answer_query(self, text: str) -> tuple[str, NoveltyInfo | None]:
        query = self.parser.build_query(text)
        if query is None:
            return self.messages.not_understood, None
        novelty = self.navigator.novelty(self.graph, query.topic, self.turn)
        answer = self._activate(query.topic, self.renderer.render(query))
        return answer, novelty

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _format_reply(
        self,
        answer: str,
        novelty: NoveltyInfo | None,
        topic: Feature,
        machine_readable: bool,
    ) -> str:
        if not answer:
            return self.messages.idk

        annotation = novelty.annotation if novelty else ""
        if machine_readable:
            return MACHINE_REPLY_TEMPLATE.format(
                index=topic.index,
                line=answer,
                novelty=annotation,
            )
        return f"{answer} {annotation}".rstrip()
