# owtorg_logger/logger/__init__.py
from .base import Logger
from .callbacks import InitCallback, Initializable, check_callback
from .levels import Severity, format_line, format_values, stdlib_level
from .stack import Stack

__all__ = [
    "Logger",
    "InitCallback",
    "Initializable",
    "check_callback",
    "Severity",
    "format_line",
    "format_values",
    "stdlib_level",
    "Stack",
]
