from __future__ import annotations
from functools import wraps
from threading import RLock
from typing import Any, Dict, Optional, Protocol
import logging
import random

from bingo.domain.board import generate_board, is_valid_number
from bingo.domain.errors import (
    AlreadyMarked,
    BingoError,
    GameInProgress,
    GameNotStarted,
    InsufficientPlayers,
    InvalidNumber,
    Unauthorized,
)
from bingo.domain.models import Group
from bingo.domain.turns import TurnCoordinator
from bingo.domain.types import GroupStatus
from bingo.domain.win import WIN_THRESHOLD, evaluate
from bingo.infrastructure.memory.registry import GroupRegistry

log = logging.getLogger(__name__)

MIN_PLAYERS = 2

# server → client event names
UPDATE_GROUPS = "updateGroups"
PLAYER_JOINED = "playerJoined"
GAME_STARTED = "gameStarted"
CELL_MARKED = "cellMarked"
NEXT_TURN = "nextTurn"
GAME_WON = "gameWon"
GAME_RESET = "gameReset"


class Broadcaster(Protocol):
    """Fan-out side of the transport: rooms plus emit.

    ``to=None`` means every connected client.
    """

    def emit(self, event: str, *args: Any, to: Optional[str] = None) -> None: ...
    def enter_room(self, sid: str, room: str) -> None: ...
    def leave_room(self, sid: str, room: str) -> None: ...


def room_of(group_name: str) -> str:
    return f"group:{group_name}"


def _acknowledged(event: str):
    """Serialize the handler and turn rule violations into an error ack."""

    def decorator(fn):
        @wraps(fn)
        def wrapper(self: "SessionService", sid: str, *args):
            with self._lock:
                try:
                    return fn(self, sid, *args)
                except BingoError as e:
                    log.info("[%s] rejected for %s: %s (%s)", event, sid, e.code, e)
                    return e.to_ack()

        return wrapper

    return decorator


class SessionService:
    """Use-case layer: one method per client event.

    Every method validates first and mutates after, then fans the result out
    through the broadcaster. The return value is the acknowledgement sent
    back to the requesting connection only.
    """

    def __init__(
        self,
        registry: GroupRegistry,
        broadcaster: Broadcaster,
        turns: Optional[TurnCoordinator] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.registry = registry
        self._out = broadcaster
        self._turns = turns or TurnCoordinator()
        self._rng = rng or random.Random()
        # one handler at a time, whatever the async mode
        self._lock = RLock()

    # ───────────────── Connection ───────────────────────────────────
    def connect(self, sid: str) -> None:
        log.info("[connect] %s", sid)
        with self._lock:
            self._out.emit(UPDATE_GROUPS, self.registry.joinable(), to=sid)

    def disconnect(self, sid: str) -> None:
        log.info("[disconnect] %s", sid)
        with self._lock:
            lobby_changed = False
            for removal in self.registry.remove_player(sid):
                room = room_of(removal.group_name)
                self._out.leave_room(sid, room)

                if removal.deleted:
                    log.info("Group %s removed (no players left)", removal.group_name)
                    lobby_changed = True
                    continue

                group = self.registry.require(removal.group_name)
                self._out.emit(PLAYER_JOINED, list(group.players), to=room)

                if not removal.was_in_progress:
                    continue
                if len(group.players) < MIN_PLAYERS:
                    log.info("Game in %s ended: not enough players", group.name)
                    self._reset(group)
                    lobby_changed = True
                elif removal.was_current:
                    nxt = self._turns.current_player(group)
                    log.info("Turn in %s passed to %s after disconnect", group.name, nxt)
                    self._out.emit(NEXT_TURN, nxt, to=room)

            if lobby_changed:
                self._publish_groups()

    # ───────────────── Lobby ────────────────────────────────────────
    @_acknowledged("createGroup")
    def create_group(self, sid: str, name: Any) -> Dict[str, Any]:
        group = self.registry.create_group(name, sid)
        self._out.enter_room(sid, room_of(group.name))
        log.info("Group %s created by %s", group.name, sid)
        self._publish_groups()
        return {"success": True, "message": "Group created successfully."}

    @_acknowledged("joinGroup")
    def join_group(self, sid: str, name: Any) -> Dict[str, Any]:
        group = self.registry.join_group(name, sid)
        room = room_of(group.name)
        self._out.enter_room(sid, room)
        log.info("%s joined %s (%d players)", sid, group.name, len(group.players))
        self._out.emit(PLAYER_JOINED, list(group.players), to=room)
        return {"success": True, "players": list(group.players)}

    # ───────────────── Gameplay ─────────────────────────────────────
    @_acknowledged("startGame")
    def start_game(self, sid: str, name: Any) -> Dict[str, Any]:
        group = self.registry.require(name)
        if group.creator != sid:
            raise Unauthorized("Only the group creator can start the game.")
        if group.in_progress:
            raise GameInProgress()
        if len(group.players) < MIN_PLAYERS:
            raise InsufficientPlayers(
                f"Cannot start game: not enough players in group {group.name}."
            )

        group.boards = {pid: generate_board(self._rng) for pid in group.players}
        group.marked_numbers.clear()
        group.winner = None
        self._turns.reset(group)
        group.status = GroupStatus.IN_PROGRESS

        log.info("Game started for group %s: %s", group.name, group.players)
        self._out.emit(
            GAME_STARTED,
            (dict(group.boards), list(group.players)),
            to=room_of(group.name),
        )
        self._publish_groups()
        return {"success": True}

    @_acknowledged("markCell")
    def mark_cell(self, sid: str, name: Any, number: Any) -> Dict[str, Any]:
        group = self.registry.require(name)
        if not group.in_progress:
            raise GameNotStarted()
        self._turns.ensure_current_player(group, sid)
        if not is_valid_number(number):
            raise InvalidNumber()
        if number in group.marked_numbers:
            raise AlreadyMarked()

        room = room_of(group.name)
        group.marked_numbers.add(number)
        self._out.emit(CELL_MARKED, {"number": number}, to=room)

        # only the marker's own board can win on this turn
        completed = evaluate(group.boards[sid], group.marked_numbers)
        if completed >= WIN_THRESHOLD:
            log.info("%s won in %s with %d lines", sid, group.name, completed)
            group.winner = sid
            self._out.emit(GAME_WON, sid, to=room)
            self._reset(group)
            self._publish_groups()
        else:
            nxt = self._turns.advance(group)
            self._out.emit(NEXT_TURN, nxt, to=room)
        return {"success": True}

    @_acknowledged("resetGame")
    def reset_game(self, sid: str, name: Any) -> Dict[str, Any]:
        log.info("Received request to reset game for group: %s", name)
        group = self.registry.require(name)
        if group.creator != sid:
            raise Unauthorized("Only the group creator can reset the game.")
        group.winner = None
        self._reset(group)
        self._publish_groups()
        return {"success": True}

    # ───────────────── Internals ───────────────────────────────────
    def _reset(self, group: Group) -> None:
        group.reset()
        log.info("Game reset for group %s", group.name)
        self._out.emit(GAME_RESET, list(group.players), to=room_of(group.name))

    def _publish_groups(self) -> None:
        self._out.emit(UPDATE_GROUPS, self.registry.joinable())
