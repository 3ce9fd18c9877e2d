"""Error definitions shared across helperkit."""

# ============================================================================
#                           General errors
# ============================================================================


class HelperkitError(Exception):
    """Base class for helperkit errors."""


# ============================================================================
#                           Command errors
# ============================================================================


class CommandFailedError(HelperkitError):
    """Raised when a shell command exits with a non-zero status or times out."""

    def __init__(self, command: str, exit_code: int, error_output: str = "") -> None:
        message = f"Command '{command}' failed with exit code {exit_code}."
        if error_output:
            message += f" {error_output.strip()}"
        super().__init__(message)
        self.command = command
        self.exit_code = exit_code
        self.error_output = error_output


# ============================================================================
#                           Storage errors
# ============================================================================


class JsonDBError(HelperkitError):
    """Raised when a JSON database file cannot be read or written."""


class InvalidJsonFileError(JsonDBError):
    """Raised when a JSON database file does not contain valid JSON."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid JSON in file {path}")
        self.path = path


# ============================================================================
#                           Remote service errors
# ============================================================================


class VatRegistryError(HelperkitError):
    """Raised when the VAT registry cannot be queried."""
