"""Shared utilities for beatshow."""

from beatshow.core.utils.json import read_json
from beatshow.core.utils.logging import configure_logging, get_logger
from beatshow.core.utils.math import trunc_div, trunc_rem, trunc_to_int

__all__ = [
    "configure_logging",
    "get_logger",
    "read_json",
    "trunc_div",
    "trunc_rem",
    "trunc_to_int",
]
