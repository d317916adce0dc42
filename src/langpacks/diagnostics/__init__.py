"""Diagnostic system for langpacks errors and lookup misses.

Provides structured diagnostics with codes, hints and locations.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConversionError,
    InvalidArgumentError,
    LocalizationConfigError,
    LocalizationError,
    PackLoadError,
)
from .templates import ErrorTemplate

__all__ = [
    "ConversionError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InvalidArgumentError",
    "LocalizationConfigError",
    "LocalizationError",
    "PackLoadError",
]
