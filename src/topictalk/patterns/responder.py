"""Regex-driven canned responder loaded from YAML."""

import logging
import re
import string
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from topictalk.core.constants import DIRECTIVE_PREFIX
from topictalk.core.errors import PreprocessorError
from topictalk.patterns.base import ConversationMemory, PreprocessResult, interpret_reply

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternRule:
    """One ``match`` regex and the reply template it produces."""

    pattern: re.Pattern[str]
    reply: str
    remember: str | None = None

    def apply(self, utterance: str, memory: ConversationMemory) -> str | None:
        match = self.pattern.search(utterance)
        if match is None:
            return None

        groups = {k: v.strip() for k, v in match.groupdict().items() if v is not None}
        if self.remember:
            value = groups.get(self.remember)
            if value:
                memory.remember(self.remember, value)

        try:
            return self.reply.format(**{**memory.values, **groups})
        except (KeyError, IndexError, ValueError) as e:
            logger.warning(f"Pattern '{self.pattern.pattern}' reply could not be filled: {e!r}")
            return None


class PatternResponder:
    """First-match-wins list of canned responses.

    Example file::

        patterns:
          - match: '^(hi|hello)\\b'
            reply: "Hello! Ask me about a topic."
          - match: "where was (?P<topic>.+?) hosted"
            reply: "FORMAT:where was_hosted_at {topic}"
    """

    def __init__(self, rules: list[PatternRule], prefix: str = DIRECTIVE_PREFIX):
        self.rules = rules
        self.prefix = prefix

    @classmethod
    def from_dict(cls, data: dict[str, Any], prefix: str = DIRECTIVE_PREFIX) -> "PatternResponder":
        entries = data.get("patterns") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise PreprocessorError("Pattern document needs a 'patterns' list")

        rules = []
        for entry in entries:
            if not isinstance(entry, dict) or "match" not in entry or "reply" not in entry:
                raise PreprocessorError(f"Pattern entry needs 'match' and 'reply': {entry!r}")
            try:
                compiled = re.compile(str(entry["match"]), re.IGNORECASE)
            except re.error as e:
                raise PreprocessorError(f"Invalid pattern '{entry['match']}': {e}") from e
            try:
                list(string.Formatter().parse(str(entry["reply"])))
            except ValueError as e:
                raise PreprocessorError(f"Invalid reply template '{entry['reply']}': {e}") from e
            rules.append(
                PatternRule(pattern=compiled, reply=str(entry["reply"]), remember=entry.get("remember"))
            )
        return cls(rules, prefix=data.get("directive_prefix", prefix))

    @classmethod
    def load(cls, path: Path | str, prefix: str = DIRECTIVE_PREFIX) -> "PatternResponder":
        pattern_path = Path(path)
        if not pattern_path.exists():
            raise FileNotFoundError(f"Pattern file not found: {pattern_path}")
        with open(pattern_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        responder = cls.from_dict(data, prefix=prefix)
        logger.info(f"Loaded {len(responder.rules)} canned patterns from {pattern_path}")
        return responder

    def process(self, utterance: str, memory: ConversationMemory) -> PreprocessResult:
        for rule in self.rules:
            reply = rule.apply(utterance, memory)
            if reply is not None:
                return interpret_reply(reply, self.prefix)
        return None
