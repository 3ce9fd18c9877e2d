"""Tabular data with an optional head and foot row, ready for export."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Table:
    """Rows of cells split into a head row, body rows and a foot row.

    The head and foot are single rows; an empty list means there is none.
    """

    head: list[Any] = field(default_factory=list)
    body: list[list[Any]] = field(default_factory=list)
    foot: list[Any] = field(default_factory=list)

    # head

    def set_head(self, cells: Iterable[Any] | None) -> None:
        self.head = list(cells or [])

    def add_head_cell(self, cell: Any) -> None:
        self.head.append(cell)

    def has_head(self) -> bool:
        return bool(self.head)

    # body

    def set_body(self, lines: Iterable[Iterable[Any]]) -> None:
        self.body = [list(line) for line in lines]

    def add_line(self, line: Iterable[Any]) -> None:
        self.body.append(list(line))

    def add_body_line(self, line: Iterable[Any]) -> None:
        self.add_line(line)

    def add_lines(self, lines: Iterable[Iterable[Any]]) -> None:
        for line in lines:
            self.add_line(line)

    # foot

    def set_foot(self, cells: Iterable[Any] | None) -> None:
        self.foot = list(cells or [])

    def add_foot_cell(self, cell: Any) -> None:
        self.foot.append(cell)

    def has_foot(self) -> bool:
        return bool(self.foot)

    # whole table

    def get_table_data(self) -> list[list[Any]]:
        """All rows in display order: head, body lines, foot."""
        rows = [list(self.head)] if self.head else []
        rows.extend(list(line) for line in self.body)
        if self.foot:
            rows.append(list(self.foot))
        return rows

    def is_empty(self) -> bool:
        return not (self.head or self.body or self.foot)

    @property
    def row_count(self) -> int:
        return len(self.body) + int(self.has_head()) + int(self.has_foot())

    @property
    def body_row_count(self) -> int:
        return len(self.body)

    @property
    def column_count(self) -> int:
        return len(self.head)

    def clear(self) -> None:
        self.head, self.body, self.foot = [], [], []

    def clear_body(self) -> None:
        self.body = []
