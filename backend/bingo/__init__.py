import logging

from flask import Flask

from .config import DevConfig
from .core.loader import load_settings
from .extensions import cors, socketio
from .infrastructure.memory.registry import GroupRegistry
from .services.session_service import SessionService
from .sockets import SocketIOBroadcaster, register_socket_events


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger("bingo").setLevel(level.upper())


def create_app(config_object=DevConfig):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.from_mapping(load_settings(app.config.get("SETTINGS_FILE")))

    _setup_logging(app.config["LOG_LEVEL"])

    # ── extensions ─────────────────────────────────────────────
    origins = app.config["CORS_ORIGINS"]
    cors.init_app(app, resources={r"/*": {"origins": origins}})
    socketio.init_app(
        app,
        cors_allowed_origins=origins,
        async_mode=app.config["SOCKETIO_ASYNC_MODE"],
    )

    # ── session state: one registry per app ──────────────────
    registry = GroupRegistry()
    app.extensions["bingo"] = SessionService(registry, SocketIOBroadcaster(socketio))

    # ── socket events ──────────────────────────────────────────
    register_socket_events(socketio)
    return app
