"""Tiny document store keeping one JSON file per collection in a directory."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

from helperkit.config import get_settings
from helperkit.domain.errors import InvalidJsonFileError, JsonDBError
from helperkit.domain.files import file

logger = logging.getLogger(__name__)

DEFAULT_DIR_PERMISSIONS = 0o755
JSON_EXTENSION = ".json"


class JsonDB:
    """Read and write ``<name>.json`` files under a data directory.

    Instances are independent; :meth:`get_instance` additionally offers a
    process-wide instance whose directory can be fixed once with
    :meth:`initialize`.
    """

    _instance: JsonDB | None = None
    _instance_data_path: Path | None = None
    _lock = threading.Lock()

    def __init__(self, data_path: str | Path | None = None) -> None:
        self._data_dir = Path(data_path) if data_path is not None else get_settings().data_dir
        self.dir_permissions = DEFAULT_DIR_PERMISSIONS

    # --- Process-wide instance ---

    @classmethod
    def initialize(cls, data_path: str | Path) -> None:
        """Set the directory of the shared instance.

        Raises:
            RuntimeError: If :meth:`get_instance` was already called.
        """
        with cls._lock:
            if cls._instance is not None:
                raise RuntimeError(
                    "Cannot initialize JsonDB: get_instance() has already been called. "
                    "Call initialize() before the first get_instance() call."
                )
            cls._instance_data_path = Path(data_path)

    @classmethod
    def get_instance(cls) -> JsonDB:
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls(cls._instance_data_path)
            return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._lock:
            cls._instance = None
            cls._instance_data_path = None

    # --- Configuration ---

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def set_data_directory(self, path: str | Path, create: bool = True) -> JsonDB:
        """Point the store at ``path``, creating it if asked to.

        Raises:
            ValueError: If the path is empty, cannot be created, does not
                exist (with ``create=False``), is not a directory or is not
                writable.
        """
        if not str(path):
            raise ValueError("Data directory path cannot be empty")

        directory = Path(path)
        if not directory.exists():
            if not create:
                raise ValueError(f"Data directory does not exist: {directory}")
            try:
                directory.mkdir(mode=self.dir_permissions, parents=True, exist_ok=True)
            except OSError as exc:
                raise ValueError(f"Unable to create data directory: {directory}") from exc

        directory = directory.resolve()
        if not directory.is_dir():
            raise ValueError(f"Path is not a directory: {directory}")
        if not os.access(directory, os.W_OK):
            raise ValueError(f"Data directory is not writable: {directory}")

        self._data_dir = directory
        return self

    # --- File operations ---

    def get_file_path(self, name: str) -> Path:
        """Path of collection ``name``; ``.json`` is appended when missing.

        Raises:
            ValueError: If ``name`` is empty or tries to leave the directory.
        """
        if not name:
            raise ValueError("Filename cannot be empty")
        return file.build_secure_path(self._data_dir, file.ensure_extension(name, JSON_EXTENSION))

    def read(self, name: str) -> Any:
        """Decoded content of ``name``; ``{}`` for a missing or empty file.

        Raises:
            InvalidJsonFileError: If the file does not hold valid JSON.
            JsonDBError: If the file cannot be read.
        """
        path = self.get_file_path(name)
        if not path.exists():
            return {}
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise JsonDBError(f"Failed to read file: {name}") from exc
        if not content.strip():
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise InvalidJsonFileError(path.name) from exc
        return {} if data is None else data

    def write(self, name: str, data: Any) -> int:
        """Pretty-print ``data`` to ``name`` and return the number of bytes written.

        The file is replaced atomically, so readers never see a partial write.

        Raises:
            ValueError: If ``data`` cannot be encoded as JSON.
            JsonDBError: If the directory or file cannot be written.
        """
        path = self.get_file_path(name)
        try:
            encoded = json.dumps(data, indent=4, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Failed to encode data to JSON: {exc}") from exc

        tmp_path: Path | None = None
        try:
            self._data_dir.mkdir(mode=self.dir_permissions, parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(dir=self._data_dir, delete=False, suffix=".tmp") as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(encoded)
            os.replace(tmp_path, path)
        except OSError as exc:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise JsonDBError(f"Failed to write file: {name}") from exc

        logger.debug("Wrote %d bytes to %s", len(encoded), path)
        return len(encoded)

    def exists(self, name: str) -> bool:
        return self.get_file_path(name).exists()

    def delete(self, name: str) -> bool:
        """Remove ``name``; False when there was nothing to remove."""
        path = self.get_file_path(name)
        if not path.exists():
            return False
        try:
            path.unlink()
        except OSError as exc:
            raise JsonDBError(f"Failed to delete file: {name}") from exc
        return True

    def list(self, full_path: bool = False) -> list[str]:
        """Names of the ``*.json`` files in the data directory, sorted."""
        if not self._data_dir.is_dir():
            return []
        files = sorted(self._data_dir.glob(f"*{JSON_EXTENSION}"))
        return [str(path) if full_path else path.name for path in files]
