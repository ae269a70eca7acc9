"""Game configuration and builder."""

from __future__ import annotations

import logging
import random

from pydantic import BaseModel, PrivateAttr
from pydantic import Field as PydanticField

from .deck import prepare_cards
from .game import Game
from .models import PlayerInfo

logger = logging.getLogger(__name__)

MIN_PLAYERS = 2
MAX_PLAYERS = 5


class GameConfig(BaseModel):
    """Configuration for a Hanabi game. Built into a Game exactly once."""

    model_config = {"validate_assignment": True}

    num_players: int = PydanticField(ge=MIN_PLAYERS, le=MAX_PLAYERS)
    is_multi: bool = False
    is_grand_finale: bool = False
    seed: int | None = None

    _built: bool = PrivateAttr(default=False)

    @classmethod
    def new(cls, num_players: int) -> "GameConfig | None":
        """Config for ``num_players``, or None if that many cannot play."""
        if num_players < MIN_PLAYERS or num_players > MAX_PLAYERS:
            return None
        return cls(num_players=num_players)

    def multi(self, flag: bool) -> "GameConfig":
        self.is_multi = flag
        return self

    def grand_finale(self, flag: bool) -> "GameConfig":
        self.is_grand_finale = flag
        return self

    def build(self, rng: random.Random | None = None) -> Game:
        """
        Shuffle, deal, and return a game ready for its first action.

        Args:
            rng: Source of randomness for the shuffle and card ids. Defaults
                to random.Random(seed), which draws fresh entropy when no
                seed is configured.
        """
        if self._built:
            raise RuntimeError("GameConfig has already been built into a game")

        if rng is None:
            rng = random.Random(self.seed)

        hands, stack = prepare_cards(self.num_players, self.is_multi, rng)
        players = [
            PlayerInfo(player_id=i, hand=hand) for i, hand in enumerate(hands)
        ]

        game = Game(
            players=players,
            stack=stack,
            discards=[],
            num_players=self.num_players,
            is_multi=self.is_multi,
            is_grand_finale=self.is_grand_finale,
        )
        logger.debug(
            f"Built game: {self.num_players} players, multi={self.is_multi}, "
            f"grand_finale={self.is_grand_finale}, {game.stack_size} cards in stack"
        )
        self._built = True
        return game
