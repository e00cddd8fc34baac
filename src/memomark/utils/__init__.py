"""Utility modules for memomark.

Provides:
- text: class_names, escape_html, escape_attr for serializers
- logger: get_logger for logging
"""

from memomark.utils.logger import get_logger
from memomark.utils.text import class_names, escape_attr, escape_html

__all__ = [
    "class_names",
    "escape_attr",
    "escape_html",
    "get_logger",
]
