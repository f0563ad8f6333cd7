"""Core errors and constants shared by every layer."""

from topictalk.core.errors import (
    ConfigError,
    GraphError,
    PreprocessorError,
    TopicTalkError,
)

__all__ = [
    "TopicTalkError",
    "ConfigError",
    "GraphError",
    "PreprocessorError",
]
