# bingo/domain/board.py
from __future__ import annotations
from typing import List, Optional
import random

from .types import Board

BOARD_SIZE = 5
NUMBERS = range(1, BOARD_SIZE * BOARD_SIZE + 1)


def generate_board(rng: Optional[random.Random] = None) -> Board:
    """Shuffle 1..25 and cut it row-major into five rows of five.

    ``random.shuffle`` is a Fisher–Yates shuffle, so every permutation is
    equally likely.
    """
    rng = rng or random.Random()
    numbers = list(NUMBERS)
    rng.shuffle(numbers)
    return [numbers[i : i + BOARD_SIZE] for i in range(0, len(numbers), BOARD_SIZE)]


def flatten(board: Board) -> List[int]:
    return [n for row in board for n in row]


def is_valid_board(board: Board) -> bool:
    if len(board) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in board):
        return False
    return sorted(flatten(board)) == list(NUMBERS)


def is_valid_number(number) -> bool:
    # bool is an int subclass; True must not pass as 1
    return isinstance(number, int) and not isinstance(number, bool) and number in NUMBERS
