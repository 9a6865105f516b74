# bingo/domain/win.py
"""Completed-line counting.

A board has 12 lines: 5 rows, 5 columns and the two diagonals. A player wins
once ``WIN_THRESHOLD`` of them are fully marked. The threshold is five, not
the single line of classic bingo.
"""
from __future__ import annotations
from typing import Iterable, List

from .types import Board

WIN_THRESHOLD = 5


def lines(board: Board) -> List[List[int]]:
    rows = [list(row) for row in board]
    columns = [list(col) for col in zip(*board)]
    size = len(board)
    diagonals = [
        [board[i][i] for i in range(size)],
        [board[i][size - 1 - i] for i in range(size)],
    ]
    return rows + columns + diagonals


def evaluate(board: Board, marked: Iterable[int]) -> int:
    """Number of lines on ``board`` whose every number is in ``marked``."""
    marked = set(marked)
    return sum(1 for line in lines(board) if all(n in marked for n in line))


def has_won(board: Board, marked: Iterable[int]) -> bool:
    return evaluate(board, marked) >= WIN_THRESHOLD
