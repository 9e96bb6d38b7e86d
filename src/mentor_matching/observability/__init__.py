"""Observability helpers shared across layers."""

from .logging import get_logger, parse_log_level, set_log_level

__all__ = ["get_logger", "parse_log_level", "set_log_level"]
