"""Utility modules for dochtml.

Provides:
- logger: get_logger for logging
"""

from dochtml.utils.logger import get_logger

__all__ = ["get_logger"]
