# bingo/domain/errors.py
from __future__ import annotations


class BingoError(ValueError):
    """Rule violation reported back to the requesting connection.

    Raised before any state is touched, so catching it never leaves a group
    half-updated.
    """

    code = "Error"
    default_message = "Request rejected."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)

    def to_ack(self) -> dict:
        return {"success": False, "error": self.code, "message": self.message}


class AlreadyExists(BingoError):
    code = "AlreadyExists"
    default_message = "Group already exists."


class NotFound(BingoError):
    code = "NotFound"
    default_message = "Group not found."


class NotJoinable(BingoError):
    code = "NotJoinable"
    default_message = "Cannot join group."


class AlreadyJoined(BingoError):
    code = "AlreadyJoined"
    default_message = "You are already in this group."


class InvalidGroupName(BingoError):
    code = "InvalidGroupName"
    default_message = "Group name must be a non-empty string."


class InsufficientPlayers(BingoError):
    code = "InsufficientPlayers"
    default_message = "Not enough players to start the game."


class GameInProgress(BingoError):
    code = "GameInProgress"
    default_message = "Game already started."


class GameNotStarted(BingoError):
    code = "GameNotStarted"
    default_message = "Game has not started!"


class NotYourTurn(BingoError):
    code = "NotYourTurn"
    default_message = "It's not your turn!"


class AlreadyMarked(BingoError):
    code = "AlreadyMarked"
    default_message = "Cell already marked!"


class InvalidNumber(BingoError):
    code = "InvalidNumber"
    default_message = "Number must be an integer between 1 and 25."


class Unauthorized(BingoError):
    code = "Unauthorized"
    default_message = "Only the group creator can do that."
