"""CLI helpers for EXAMPORTAL.

Utilities used by the command-line interface: message emitters that write to
stderr with emoji to ASCII fallbacks, and Click callbacks that parse repeated
``KEY=VALUE`` / ``NAME=LEVEL`` options.
"""

from .fields import parse_fields, parse_form_values, parse_required_fields
from .messages import error, success, warn

__all__ = [
    "error",
    "parse_fields",
    "parse_form_values",
    "parse_required_fields",
    "success",
    "warn",
]
