"""Bingo game server
==================

Entry point for the Socket.IO bingo backend. Players create or join named
groups, the creator starts the game, everyone gets their own shuffled 5×5
board and takes turns calling numbers. First to complete five lines
(rows, columns or diagonals) on their own board wins.

Run with ``python app.py``; host and port come from ``BINGO_HOST`` /
``BINGO_PORT`` (default ``0.0.0.0:3001``).
"""

import os

if os.getenv("BINGO_ASYNC_MODE", "eventlet") == "eventlet":
    # green locks and sockets for the whole process, before anything else imports them
    import eventlet

    eventlet.monkey_patch()

from bingo import create_app  # noqa: E402
from bingo.config import BaseConfig, DevConfig  # noqa: E402
from bingo.extensions import socketio  # noqa: E402

config = DevConfig if os.getenv("FLASK_DEBUG") == "1" else BaseConfig
app = create_app(config)

if __name__ == "__main__":
    socketio.run(app, host=app.config["HOST"], port=app.config["PORT"])
