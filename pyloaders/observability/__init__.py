"""Observability helpers."""

from pyloaders.observability.logger import get_logger

__all__ = ["get_logger"]
