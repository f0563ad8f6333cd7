"""Configuration models for TopicTalk."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from topictalk.core import constants

SUPPORTED_VERSIONS = frozenset({"1.0"})
CURRENT_VERSION = "1.0"


class DialogueSettings(BaseModel):
    """Behaviour of the dialogue session."""

    novelty_amount: int = Field(
        default=constants.DEFAULT_NOVELTY_AMOUNT,
        ge=1,
        description="Turns after which a topic counts as fresh again; max suggestions",
    )
    direction_policy: Literal["last_match", "longest_match"] = Field(
        default="last_match",
        description="How competing direction words in one utterance are resolved",
    )
    directive_prefix: str = Field(
        default=constants.DIRECTIVE_PREFIX,
        description="Canned replies starting with this are re-fed as utterances",
    )


class MessagesConfig(BaseModel):
    """Fixed replies."""

    idk: str = constants.IDK
    not_understood: str = constants.NOT_UNDERSTOOD
    exhausted: str = constants.EXHAUSTED
    no_answer: str = constants.NO_ANSWER


class GraphSourceConfig(BaseModel):
    """Where the feature graph comes from."""

    path: str | None = Field(default=None, description="YAML graph file")
    strict_relations: bool = Field(
        default=False, description="Reject relation labels that are not directions"
    )
    persist: bool = Field(
        default=False, description="Write discussion counts back to the graph file"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str | None = Field(default=None, description="Rotating JSON log file")


class TopicTalkConfig(BaseModel):
    """Main configuration model."""

    version: str = CURRENT_VERSION
    dialogue: DialogueSettings = Field(default_factory=DialogueSettings)
    messages: MessagesConfig = Field(default_factory=MessagesConfig)
    graph: GraphSourceConfig = Field(default_factory=GraphSourceConfig)
    patterns_path: str | None = Field(default=None, description="YAML canned-response file")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "TopicTalkConfig":
        """Load configuration from YAML file."""
        from topictalk.config.loader import ConfigLoader

        return ConfigLoader.load(path)
