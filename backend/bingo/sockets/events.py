from flask import current_app, request

from ..services.session_service import SessionService


# ── helpers ─────────────────────────────────────────────────
def _service() -> SessionService:
    return current_app.extensions["bingo"]


# ───────────────── events ──────────────────────────────────
# Exactly one handler per event; the return value is the client's ack.
def register_events(sio):
    # ---------- connect / disconnect -----------------------
    @sio.event
    def connect(auth=None):
        _service().connect(request.sid)

    @sio.event
    def disconnect(reason=None):
        _service().disconnect(request.sid)

    # ---------- lobby --------------------------------------
    @sio.on("createGroup")
    def create_group(group_name=None):
        return _service().create_group(request.sid, group_name)

    @sio.on("joinGroup")
    def join_group(group_name=None):
        return _service().join_group(request.sid, group_name)

    # ---------- gameplay -----------------------------------
    @sio.on("startGame")
    def start_game(group_name=None):
        return _service().start_game(request.sid, group_name)

    @sio.on("markCell")
    def mark_cell(group_name=None, number=None):
        return _service().mark_cell(request.sid, group_name, number)

    @sio.on("resetGame")
    def reset_game(group_name=None):
        return _service().reset_game(request.sid, group_name)
