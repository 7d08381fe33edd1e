"""Utility modules for verlex.

Provides:
- logger: get_logger for namespaced logging
"""

from verlex.utils.logger import get_logger

__all__ = ["get_logger"]
