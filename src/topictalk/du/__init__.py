"""Utterance understanding: normalization, query model and parser."""

from topictalk.du.normalizer import PUNCTUATION, normalize, strip
from topictalk.du.parser import QueryParser
from topictalk.du.query import Query, Question

__all__ = ["PUNCTUATION", "normalize", "strip", "Query", "Question", "QueryParser"]
