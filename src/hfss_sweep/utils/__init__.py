"""hfss-sweep utility helpers."""

from .log import init_logging, get_logger

__all__ = ["init_logging", "get_logger"]
