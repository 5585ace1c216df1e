"""Shared helpers for linemark."""

from linemark.utils.logger import get_logger

__all__ = ["get_logger"]
