"""Observability helpers."""

from topictalk.observability.logging import ContextLogger, setup_logging

__all__ = ["ContextLogger", "setup_logging"]
