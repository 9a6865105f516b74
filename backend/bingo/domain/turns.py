# bingo/domain/turns.py
from __future__ import annotations

from .errors import NotYourTurn
from .models import Group


class TurnCoordinator:
    """Whose turn it is inside a group.

    Turn order is join order; the index lives on the group itself so the
    coordinator holds no state and one instance serves every group.
    """

    def current_player(self, group: Group) -> str:
        if not group.players:
            raise ValueError(f"Group {group.name!r} has no players")
        return group.players[group.current_player_index]

    def is_current_player(self, group: Group, player_id: str) -> bool:
        return bool(group.players) and self.current_player(group) == player_id

    def ensure_current_player(self, group: Group, player_id: str) -> None:
        if not self.is_current_player(group, player_id):
            raise NotYourTurn()

    def advance(self, group: Group) -> str:
        """Pass the turn to the next player and return them."""
        if not group.players:
            # empty groups are deleted, never advanced
            raise ValueError(f"Group {group.name!r} has no players")
        group.current_player_index = (group.current_player_index + 1) % len(
            group.players
        )
        return group.players[group.current_player_index]

    def reset(self, group: Group) -> None:
        group.current_player_index = 0

    def remove_player(self, group: Group, player_id: str) -> bool:
        """Drop ``player_id`` from the turn order.

        The index keeps pointing at the same player. If the leaver held the
        turn it moves to whoever followed them. Returns True when the leaver
        was the current player.
        """
        idx = group.players.index(player_id)
        was_current = idx == group.current_player_index
        group.players.pop(idx)

        if idx < group.current_player_index:
            group.current_player_index -= 1
        if group.players:
            group.current_player_index %= len(group.players)
        else:
            group.current_player_index = 0
        return was_current
