from flask_socketio import SocketIO
from .broadcaster import SocketIOBroadcaster
from .events import register_events

__all__ = ["SocketIOBroadcaster", "register_socket_events"]


def register_socket_events(socketio: SocketIO):
    register_events(socketio)
