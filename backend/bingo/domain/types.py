# bingo/domain/types.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List


class GroupStatus(Enum):
    WAITING = "waiting"
    IN_PROGRESS = "in_progress"


# 5×5 board, row-major
Board = List[List[int]]


@dataclass(frozen=True)
class Removal:
    """What happened to one group when a player left it."""

    group_name: str
    deleted: bool
    was_current: bool
    was_in_progress: bool
