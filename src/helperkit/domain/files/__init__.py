"""File and filesystem helpers."""

from helperkit.domain.value_objects import OutputFile

from . import file, filesystem, mime_types

__all__ = ["OutputFile", "file", "filesystem", "mime_types"]
