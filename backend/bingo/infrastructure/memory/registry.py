"""In-memory group registry. Lives as long as the app that owns it."""

from __future__ import annotations
from typing import Dict, List, Optional

from ...domain.errors import (
    AlreadyExists,
    AlreadyJoined,
    InvalidGroupName,
    NotFound,
    NotJoinable,
)
from ...domain.models import Group
from ...domain.turns import TurnCoordinator
from ...domain.types import GroupStatus, Removal


class GroupRegistry:
    def __init__(self, turns: Optional[TurnCoordinator] = None):
        self._groups: Dict[str, Group] = {}
        self._turns = turns or TurnCoordinator()

    # ── group CRUD ──────────────────────────────────────────────
    def create_group(self, name, creator_id: str) -> Group:
        if not isinstance(name, str) or not name.strip():
            raise InvalidGroupName()
        if name in self._groups:
            raise AlreadyExists()
        group = Group(name=name, players=[creator_id])
        self._groups[name] = group
        return group

    def join_group(self, name, player_id: str) -> Group:
        group = self.require(name)
        if group.status is not GroupStatus.WAITING:
            raise NotJoinable()
        if group.has_player(player_id):
            raise AlreadyJoined()
        group.players.append(player_id)
        return group

    def get(self, name) -> Optional[Group]:
        if not isinstance(name, str):
            return None
        return self._groups.get(name)

    def require(self, name) -> Group:
        group = self.get(name)
        if group is None:
            raise NotFound()
        return group

    def remove(self, name: str) -> None:
        self._groups.pop(name, None)

    def clear(self) -> None:
        self._groups.clear()

    # ── membership ─────────────────────────────────────────────
    def remove_player(self, player_id: str) -> List[Removal]:
        """Take ``player_id`` out of every group it belongs to.

        A connection normally sits in one group, but nothing stops a client
        from creating one group and joining another, so all groups are
        scanned. Groups left empty are deleted.
        """
        removals: List[Removal] = []
        for group in self.groups_of(player_id):
            was_in_progress = group.in_progress
            was_current = self._turns.remove_player(group, player_id)
            group.boards.pop(player_id, None)
            deleted = not group.players
            if deleted:
                self.remove(group.name)
            removals.append(
                Removal(
                    group_name=group.name,
                    deleted=deleted,
                    was_current=was_current and was_in_progress,
                    was_in_progress=was_in_progress,
                )
            )
        return removals

    def groups_of(self, player_id: str) -> List[Group]:
        return [g for g in self._groups.values() if g.has_player(player_id)]

    # ── lobby ──────────────────────────────────────────────────
    def joinable(self) -> List[str]:
        """Names of waiting groups, oldest first."""
        return [
            name
            for name, g in self._groups.items()
            if g.status is GroupStatus.WAITING
        ]

    def __contains__(self, name) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self._groups)
