"""Internal utilities for Marklet."""

from marklet.utils.logger import get_logger

__all__ = ["get_logger"]
