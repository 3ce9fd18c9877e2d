"""Shared helpers for the helperkit CLI."""

from .hyperlinks import hyperlink
from .log_level_parser import parse_log_level
from .messages import error, invalid, success, valid, warn

__all__ = ["error", "hyperlink", "invalid", "parse_log_level", "success", "valid", "warn"]
