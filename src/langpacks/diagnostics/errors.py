"""Localization exception hierarchy with structured diagnostics.

All exceptions may store a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConversionError",
    "InvalidArgumentError",
    "LocalizationConfigError",
    "LocalizationError",
    "PackLoadError",
]


class LocalizationError(Exception):
    """Base exception for all langpacks errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocalizationError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LocalizationConfigError(LocalizationError):
    """Initialization cannot proceed (scan directory does not exist).

    The one fatal condition: raised to the caller of initialize().
    """


class InvalidArgumentError(LocalizationError, ValueError):
    """Absent culture or pack passed to a direct-activation API.

    Indicates a collaborator bug rather than a missing translation, so it
    is raised instead of degrading to the Default pack.
    """


class PackLoadError(LocalizationError):
    """Pack file could not be turned into a LanguagePack.

    Never escapes PackLoader.load(); captured in PackLoadResult.error.
    """


class ConversionError(LocalizationError):
    """Raw string could not be converted to the requested type.

    Never escapes LanguagePack.translate(); the caller's fallback is
    returned instead.

    Attributes:
        target_type: The type that was requested
    """

    def __init__(self, message: str | Diagnostic, *, target_type: type | None = None) -> None:
        """Initialize ConversionError.

        Args:
            message: Error message string OR Diagnostic object
            target_type: The type that was requested
        """
        super().__init__(message)
        self.target_type = target_type
