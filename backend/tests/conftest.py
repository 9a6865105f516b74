import random

import pytest

from bingo import create_app
from bingo.config import TestConfig
from bingo.infrastructure.memory.registry import GroupRegistry
from bingo.services.session_service import SessionService

# row-major 1..25: rows are 1-5, 6-10, ...; column 0 is 1,6,11,16,21
ORDERED_BOARD = [list(range(r * 5 + 1, r * 5 + 6)) for r in range(5)]


class FakeBroadcaster:
    """Records every emit and keeps room membership like Socket.IO would."""

    def __init__(self):
        self.sent = []
        self.rooms = {}

    def emit(self, event, *args, to=None):
        self.sent.append((event, args, to))

    def enter_room(self, sid, room):
        self.rooms.setdefault(room, set()).add(sid)

    def leave_room(self, sid, room):
        self.rooms.get(room, set()).discard(sid)

    # helpers -----------------------------------------------------------
    def events(self, name=None):
        return [e for e in self.sent if name is None or e[0] == name]

    def last(self, name):
        found = self.events(name)
        assert found, f"no {name!r} emitted"
        return found[-1]

    def clear(self):
        self.sent.clear()


@pytest.fixture
def broadcaster():
    return FakeBroadcaster()


@pytest.fixture
def registry():
    return GroupRegistry()


@pytest.fixture
def service(registry, broadcaster):
    return SessionService(registry, broadcaster, rng=random.Random(1234))


@pytest.fixture
def app():
    return create_app(TestConfig)


@pytest.fixture
def board():
    return [row[:] for row in ORDERED_BOARD]
