from __future__ import annotations
from typing import Any, Optional

from flask_socketio import SocketIO

NAMESPACE = "/"


class SocketIOBroadcaster:
    """Broadcaster backed by Flask-SocketIO rooms.

    Goes through ``socketio.server`` for room changes so it works for any
    sid, not only the one whose request is being handled.
    """

    def __init__(self, sio: SocketIO, namespace: str = NAMESPACE):
        self._sio = sio
        self._namespace = namespace

    def emit(self, event: str, *args: Any, to: Optional[str] = None) -> None:
        self._sio.emit(event, *args, to=to, namespace=self._namespace)

    def enter_room(self, sid: str, room: str) -> None:
        self._sio.server.enter_room(sid, room, namespace=self._namespace)

    def leave_room(self, sid: str, room: str) -> None:
        self._sio.server.leave_room(sid, room, namespace=self._namespace)
