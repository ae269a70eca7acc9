"""Errors raised for illegal Hanabi moves."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import CardId, CardInfo


class HanabiError(ValueError):
    """Base class for rule violations. Each subclass carries the offending value."""

    short = "illegal move"

    def __init__(self, payload: Any):
        self.payload = payload
        super().__init__(f"{self.short}: {self.detailed()}")

    def detailed(self) -> str:
        return repr(self.payload)


class InvalidCard(HanabiError):
    """Card is not in the acting player's hand, or the field rejected it."""

    short = "invalid card id"

    def __init__(self, card_id: CardId):
        self.card_id = card_id
        super().__init__(card_id)


class InvalidPlayer(HanabiError):
    """Player index is outside the table."""

    short = "invalid player id"

    def __init__(self, player: int):
        self.player = player
        super().__init__(player)


class IncorrectInfo(HanabiError):
    """Tell aimed at an unknown player, or matching no card."""

    short = "incorrect card info"

    def __init__(self, info: CardInfo):
        self.info = info
        super().__init__(info)
