from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from .types import Board, GroupStatus


# ── Group  (data, no rules) ─────────────────────────────────
@dataclass
class Group:
    name: str
    players: List[str] = field(default_factory=list)
    status: GroupStatus = GroupStatus.WAITING

    boards: Dict[str, Board] = field(default_factory=dict)
    marked_numbers: Set[int] = field(default_factory=set)
    current_player_index: int = 0
    winner: Optional[str] = None

    @property
    def creator(self) -> Optional[str]:
        # the first player left in the list inherits creator rights
        return self.players[0] if self.players else None

    @property
    def in_progress(self) -> bool:
        return self.status is GroupStatus.IN_PROGRESS

    def has_player(self, player_id: str) -> bool:
        return player_id in self.players

    def reset(self) -> None:
        """Back to the lobby: clear everything dealt or marked."""
        self.status = GroupStatus.WAITING
        self.boards.clear()
        self.marked_numbers.clear()
        self.current_player_index = 0

