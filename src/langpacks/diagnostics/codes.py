"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup misses (recovered locally, never raised)
        2000-2999: Conversion errors (raw string to requested type)
        3000-3999: Loading errors (pack files on disk)
        4000-4999: Configuration and argument errors (raised to the caller)
    """

    # Lookup misses (1000-1999)
    GROUP_KEY_EMPTY = 1001
    ITEM_KEY_EMPTY = 1002
    GROUP_NOT_FOUND = 1003
    ITEM_NOT_FOUND = 1004

    # Conversion errors (2000-2999)
    CONVERSION_UNSUPPORTED = 2001
    CONVERSION_FAILED = 2002

    # Loading errors (3000-3999)
    PACK_READ_FAILED = 3001
    PACK_PARSE_FAILED = 3002
    PACK_IDENTITY_MISSING = 3003
    PACK_SHAPE_INVALID = 3004
    PACK_TOO_LARGE = 3005

    # Configuration and argument errors (4000-4999)
    SCAN_PATH_NOT_FOUND = 4001
    INVALID_ARGUMENT = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context to explain
    a miss or failure in a single log line or exception message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the problem
        location: Where it happened (pack file path or "culture:group/item")
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Control characters in the message are escaped so pack content cannot
        inject fake log lines.

        Example output:
            warning[ITEM_NOT_FOUND]: Item 'Title' not found in group '10'
              --> en-us:10/Title
              = help: Add the item to the pack or check the key spelling

        Returns:
            Formatted error message
        """
        parts = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.location:
            parts.append(f"  --> {_escape(self.location)}")
        if self.hint:
            parts.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(parts)


def _escape(text: str) -> str:
    """Escape control characters for single-line log output."""
    return text.encode("unicode_escape").decode("ascii") if not text.isprintable() else text
