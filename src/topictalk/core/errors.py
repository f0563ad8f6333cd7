"""Core error hierarchy."""


class TopicTalkError(Exception):
    """Base class for all TopicTalk errors."""

    pass


class ConfigError(TopicTalkError):
    """Raised when configuration is invalid or inconsistent."""


class GraphError(TopicTalkError):
    """Raised when the feature graph is malformed or misused."""

    pass


class PreprocessorError(TopicTalkError):
    """Raised when the canned-response layer cannot be built."""

    pass
