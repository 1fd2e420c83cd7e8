"""A coordinate-list sparse matrix."""

from __future__ import annotations

from typing import Sequence


class SparseMatrix:
    """Stores only the non-zero entries of a dense matrix."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        rows = [list(row) for row in matrix]
        if not rows:
            raise ValueError("matrix must have at least one row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        self._rows = len(rows)
        self._cols = width
        self._values: dict[tuple[int, int], int] = {
            (i, j): value
            for i, row in enumerate(rows)
            for j, value in enumerate(row)
            if value != 0
        }

    @property
    def shape(self) -> tuple[int, int]:
        return self._rows, self._cols

    def get(self, row: int, col: int) -> int:
        """Return the entry at ``(row, col)``; unstored entries are 0."""
        return self._values.get((row, col), 0)

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, col = position
        return self.get(row, col)

    def to_rows(self) -> list[list[int]]:
        return [
            [self.get(i, j) for j in range(self._cols)] for i in range(self._rows)
        ]

    def format(self) -> str:
        """Render the matrix, each value followed by a space, one row per line."""
        return "".join(
            "".join(f"{value} " for value in row) + "\n" for row in self.to_rows()
        )

    def __repr__(self) -> str:
        return f"SparseMatrix({self.to_rows()!r})"