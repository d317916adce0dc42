"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    Keeps messages:
        - Testable
        - Consistently formatted
        - Documented in one place
    """

    # ------------------------------------------------------------------
    # Lookup misses
    # ------------------------------------------------------------------

    @staticmethod
    def group_key_empty(pack_name: str) -> Diagnostic:
        """Group key missing from a lookup.

        Args:
            pack_name: English name of the pack being queried

        Returns:
            Diagnostic for GROUP_KEY_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.GROUP_KEY_EMPTY,
            message=f"Group key must not be empty (pack '{pack_name}')",
            severity="warning",
        )

    @staticmethod
    def item_key_empty(group_key: str, pack_name: str) -> Diagnostic:
        """Item key missing from a lookup."""
        return Diagnostic(
            code=DiagnosticCode.ITEM_KEY_EMPTY,
            message=f"Item key must not be empty (group '{group_key}', pack '{pack_name}')",
            severity="warning",
        )

    @staticmethod
    def group_not_found(group_key: str, pack_name: str, culture_id: str) -> Diagnostic:
        """Group key not present in the pack.

        Args:
            group_key: The group that was requested
            pack_name: English name of the pack being queried
            culture_id: Culture of the pack being queried

        Returns:
            Diagnostic for GROUP_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.GROUP_NOT_FOUND,
            message=f"Group '{group_key}' was not found in the {pack_name} pack",
            hint="Check the group key spelling or add the group to the pack",
            location=f"{culture_id}:{group_key}",
            severity="warning",
        )

    @staticmethod
    def item_not_found(
        group_key: str, item_key: str, pack_name: str, culture_id: str
    ) -> Diagnostic:
        """Item key not present in an existing group.

        Args:
            group_key: The group that was found
            item_key: The item that was requested
            pack_name: English name of the pack being queried
            culture_id: Culture of the pack being queried

        Returns:
            Diagnostic for ITEM_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.ITEM_NOT_FOUND,
            message=(
                f"Item '{item_key}' was not found for group '{group_key}' "
                f"in the {pack_name} pack"
            ),
            hint="Add the item to the pack or check the key spelling",
            location=f"{culture_id}:{group_key}/{item_key}",
            severity="warning",
        )

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    @staticmethod
    def conversion_unsupported(type_name: str) -> Diagnostic:
        """No converter registered for the requested type."""
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_UNSUPPORTED,
            message=f"No string converter registered for type '{type_name}'",
            hint="Register a converter with ConverterRegistry.register()",
        )

    @staticmethod
    def conversion_failed(raw: str, type_name: str, reason: str) -> Diagnostic:
        """Converter rejected the raw string.

        Args:
            raw: The stored string value
            type_name: Name of the requested type
            reason: Message of the underlying exception

        Returns:
            Diagnostic for CONVERSION_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_FAILED,
            message=f"Failed to convert {raw!r} to {type_name}: {reason}",
        )

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @staticmethod
    def pack_read_failed(path: str, reason: str) -> Diagnostic:
        """Pack file could not be read from disk."""
        return Diagnostic(
            code=DiagnosticCode.PACK_READ_FAILED,
            message=f"Could not read pack file: {reason}",
            location=path,
        )

    @staticmethod
    def pack_parse_failed(path: str, reason: str) -> Diagnostic:
        """Pack file is not well-formed XML/JSON."""
        return Diagnostic(
            code=DiagnosticCode.PACK_PARSE_FAILED,
            message=f"Could not parse pack file: {reason}",
            location=path,
        )

    @staticmethod
    def pack_identity_missing(path: str) -> Diagnostic:
        """Pack source declares no culture id."""
        return Diagnostic(
            code=DiagnosticCode.PACK_IDENTITY_MISSING,
            message="Pack does not declare a CultureId",
            hint="Add a CultureId (e.g. \"en-us\") to the pack header",
            location=path,
        )

    @staticmethod
    def pack_shape_invalid(path: str, detail: str) -> Diagnostic:
        """Pack parsed but its structure is not group -> item -> string."""
        return Diagnostic(
            code=DiagnosticCode.PACK_SHAPE_INVALID,
            message=f"Invalid pack structure: {detail}",
            location=path,
        )

    @staticmethod
    def pack_too_large(path: str, size: int, limit: int) -> Diagnostic:
        """Pack file exceeds the configured size limit."""
        return Diagnostic(
            code=DiagnosticCode.PACK_TOO_LARGE,
            message=f"Pack file is {size} bytes, limit is {limit} bytes",
            hint="Split the pack or raise ScanConfig.max_file_size",
            location=path,
        )

    # ------------------------------------------------------------------
    # Configuration and arguments
    # ------------------------------------------------------------------

    @staticmethod
    def scan_path_not_found(path: str) -> Diagnostic:
        """Scan directory does not exist as given nor under the base directory."""
        return Diagnostic(
            code=DiagnosticCode.SCAN_PATH_NOT_FOUND,
            message=f"Localization path {path} doesn't exist",
            hint="Pass an existing directory or set ScanConfig.base_dir",
            location=path,
        )

    @staticmethod
    def invalid_argument(name: str, detail: str) -> Diagnostic:
        """Caller passed an absent culture or pack."""
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARGUMENT,
            message=f"Invalid argument '{name}': {detail}",
        )
