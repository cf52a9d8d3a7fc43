"""Backtracking searches: parentheses, Sudoku, combinations, permutations, queens, subsets."""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from itertools import compress, product

_SUDOKU_DIGITS = "123456789"
_EMPTY = "."


def _parentheses(n: int, opened: int, closed: int, prefix: str) -> Iterator[str]:
    if opened + closed == 2 * n:
        yield prefix
        return
    if opened < n:
        yield from _parentheses(n, opened + 1, closed, prefix + "(")
    if closed < opened:
        yield from _parentheses(n, opened, closed + 1, prefix + ")")


def generate_parentheses(n: int) -> list[str]:
    """Every balanced string of ``n`` pairs of parentheses, opening brackets first."""
    return list(_parentheses(n, 0, 0, ""))


def _fits(board: Sequence[Sequence[str]], row: int, col: int, digit: str) -> bool:
    if digit in board[row]:
        return False
    if any(line[col] == digit for line in board):
        return False
    top, left = row // 3 * 3, col // 3 * 3
    return all(
        board[r][c] != digit for r in range(top, top + 3) for c in range(left, left + 3)
    )


def solve_sudoku(board: MutableSequence[MutableSequence[str]]) -> bool:
    """Fill the empty ``"."`` cells of a 9x9 board in place.

    Returns True when a solution was found; otherwise the board is left as it was.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("a Sudoku board is 9 rows of 9 cells")
    empty = [(r, c) for r, row in enumerate(board) for c, cell in enumerate(row) if cell == _EMPTY]

    def place(position: int) -> bool:
        if position == len(empty):
            return True
        row, col = empty[position]
        for digit in _SUDOKU_DIGITS:
            if _fits(board, row, col, digit):
                board[row][col] = digit
                if place(position + 1):
                    return True
                board[row][col] = _EMPTY
        return False

    return place(0)


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """All combinations of candidates (each reusable) that sum to ``target``."""
    if any(candidate <= 0 for candidate in candidates):
        raise ValueError("candidates must be positive")
    found: list[list[int]] = []
    current: list[int] = []

    def explore(index: int, remaining: int) -> None:
        if remaining == 0:
            found.append(list(current))
            return
        if index == len(candidates) or remaining < 0:
            return
        current.append(candidates[index])
        explore(index, remaining - candidates[index])
        current.pop()
        explore(index + 1, remaining)

    explore(0, target)
    return found


def permute_unique(nums: Sequence[int]) -> list[list[int]]:
    """Every distinct ordering of ``nums``."""
    values = list(nums)
    found: list[list[int]] = []

    def permute(index: int) -> None:
        if index == len(values):
            found.append(list(values))
            return
        used = set()
        for i in range(index, len(values)):
            if values[i] in used:
                continue
            values[i], values[index] = values[index], values[i]
            permute(index + 1)
            values[i], values[index] = values[index], values[i]
            used.add(values[i])

    permute(0)
    return found


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, drawn with ``Q`` and ``.``."""
    if n < 1:
        raise ValueError("the board needs at least one row")
    solutions: list[list[str]] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()
    placement: list[int] = []

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * col + "Q" + "." * (n - col - 1) for col in placement])
            return
        for col in range(n):
            if col in columns or col - row in diagonals or col + row in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(col - row)
            anti_diagonals.add(col + row)
            placement.append(col)
            place(row + 1)
            placement.pop()
            columns.remove(col)
            diagonals.remove(col - row)
            anti_diagonals.remove(col + row)

    place(0)
    return solutions


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``, leaving elements out before taking them in."""
    return [list(compress(nums, mask)) for mask in product((False, True), repeat=len(nums))]