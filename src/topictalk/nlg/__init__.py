"""Natural-language generation of answers."""

from topictalk.nlg.renderer import AnswerRenderer, join_and, upper_first

__all__ = ["AnswerRenderer", "join_and", "upper_first"]
