"""Unique identifier sources.

``VCard.add_unique_identifier`` takes its UID from an :class:`IdGenerator`;
:class:`ULIDGenerator` is the default. Tests inject predictable generators.
"""

import abc
import threading

from ulid import monotonic

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Something that hands out unique string identifiers."""

    @abc.abstractmethod
    def new_id(self) -> str:
        """Return an identifier never returned before by this generator."""


class ULIDGenerator(IdGenerator):
    """26-character ULIDs, monotonic within the process.

    Successive ids sort in creation order, even when several are created in
    the same millisecond or from several threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            return str(monotonic.new())
