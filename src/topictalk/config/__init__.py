"""Configuration module for TopicTalk."""

from topictalk.config.loader import ConfigLoader
from topictalk.config.models import (
    DialogueSettings,
    GraphSourceConfig,
    LoggingConfig,
    MessagesConfig,
    TopicTalkConfig,
)

__all__ = [
    "ConfigLoader",
    "DialogueSettings",
    "GraphSourceConfig",
    "LoggingConfig",
    "MessagesConfig",
    "TopicTalkConfig",
]
