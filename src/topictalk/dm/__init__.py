"""Dialogue management: session state machine, buffer and topic navigation."""

from topictalk.dm.buffer import PaginatedBuffer
from topictalk.dm.navigator import NoveltyInfo, TopicNavigator
from topictalk.dm.session import DialogueSession

__all__ = ["DialogueSession", "NoveltyInfo", "PaginatedBuffer", "TopicNavigator"]
