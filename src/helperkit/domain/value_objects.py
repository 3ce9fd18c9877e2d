"""Module including value objects used across the domain layer."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a shell command run."""

    success: bool
    output: str
    error_output: str
    exit_code: int

    def is_successful(self) -> bool:
        return self.success

    def is_failed(self) -> bool:
        return not self.success

    def combined_output(self) -> str:
        """Return stdout followed by stderr (when there is any) on a new line."""
        if self.error_output:
            return f"{self.output}\n{self.error_output}"
        return self.output


@dataclass
class OutputFile:
    """A file produced by the application: where it lives and its display name."""

    path: str | None = None
    name: str | None = None

    def get_extension(self) -> str | None:
        """Lowercase extension taken from the path, else from the name."""
        for candidate in (self.path, self.name):
            if candidate:
                suffix = Path(candidate).suffix
                if suffix:
                    return suffix[1:].lower()
        return None
