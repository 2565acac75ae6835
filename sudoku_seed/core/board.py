"""Fixed-size 9x9 Sudoku board representation."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional


SIZE = 9
BOX_SIZE = 3
EMPTY = 0

ROW_SEPARATOR = '-' * 21


class SudokuBoard:
    """
    A 9x9 Sudoku grid of digits, 0 meaning an empty cell.

    The grid is a fixed (9, 9) numpy array that is mutated in place by the
    generator and the solver.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid. If None, creates an empty board.
        """
        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (SIZE, SIZE):
                raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}")
            if grid.min() < EMPTY or grid.max() > SIZE:
                raise ValueError(f"Grid values must be 0-{SIZE}")
            self.grid = grid.astype(np.int32)
        else:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        return SudokuBoard(self.grid)

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < EMPTY or value > SIZE:
            raise ValueError(f"Value must be 0-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = EMPTY

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == EMPTY

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the 3x3 box containing (row, col)."""
        box_row = (row // BOX_SIZE) * BOX_SIZE
        box_col = (col // BOX_SIZE) * BOX_SIZE
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def get_box_index(self, row: int, col: int) -> int:
        """Get the box index (0 to 8) for a cell."""
        return (row // BOX_SIZE) * BOX_SIZE + (col // BOX_SIZE)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get all empty cell positions in row-major order."""
        empty = []
        for i in range(SIZE):
            for j in range(SIZE):
                if self.is_empty(i, j):
                    empty.append((i, j))
        return empty

    def find_empty(self) -> Optional[Tuple[int, int]]:
        """Return the first empty cell in row-major order, or None if full."""
        for i in range(SIZE):
            for j in range(SIZE):
                if self.is_empty(i, j):
                    return i, j
        return None

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == EMPTY))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != EMPTY))

    def fill_ratio(self) -> float:
        """Fraction of the 81 cells holding a digit."""
        return self.count_filled() / (SIZE * SIZE)

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        units = [self.get_row(i) for i in range(SIZE)]
        units += [self.get_col(j) for j in range(SIZE)]
        units += [
            self.get_box(box_row, box_col)
            for box_row in range(0, SIZE, BOX_SIZE)
            for box_col in range(0, SIZE, BOX_SIZE)
        ]

        for unit in units:
            non_zero = unit[unit != EMPTY]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False

        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of 81 characters, 0 or . for empty, 1-9 for digits.
        """
        if len(s) != SIZE * SIZE:
            raise ValueError(f"String length must be {SIZE * SIZE}, got {len(s)}")

        values = []
        for c in s:
            if c == '.':
                values.append(EMPTY)
            elif c.isdigit():
                values.append(int(c))
            else:
                raise ValueError(f"Invalid character in puzzle string: {c!r}")

        return cls(np.array(values, dtype=np.int32).reshape(SIZE, SIZE))

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        return cls(np.array(data, dtype=np.int32))

    def __str__(self) -> str:
        return format_board(self)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())


def format_board(board: SudokuBoard) -> str:
    """
    Render the board as rows of space-separated digits.

    A dashed line separates every third row and "| " precedes every third
    column, giving the usual 3x3 block layout:

        5 3 0 | 0 7 0 | 0 0 0
        ...
        ---------------------
    """
    lines = []
    for i in range(SIZE):
        if i % BOX_SIZE == 0 and i != 0:
            lines.append(ROW_SEPARATOR)

        row_str = ''
        for j in range(SIZE):
            if j % BOX_SIZE == 0 and j != 0:
                row_str += '| '
            row_str += f'{board.get(i, j)} '
        lines.append(row_str)

    return '\n'.join(lines)
