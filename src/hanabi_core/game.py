"""Core game logic for Hanabi: the game aggregate and action processing."""

from __future__ import annotations

import logging

from pydantic import BaseModel, model_validator
from pydantic import Field as PydanticField

from .errors import IncorrectInfo, InvalidCard, InvalidPlayer
from .models import (
    Action,
    Card,
    CardId,
    CardInfo,
    DiscardAction,
    Field,
    PlayAction,
    PlayerInfo,
    RevealedInfo,
    TellAction,
)

logger = logging.getLogger(__name__)


class Game(BaseModel):
    """The authoritative state of one Hanabi game."""

    # Player hands, indexed by player id
    players: list[PlayerInfo]

    # Draw stack (hidden from all players; only its size is public)
    stack: list[Card] = PydanticField(default_factory=list)

    # Discard pile
    discards: list[Card] = PydanticField(default_factory=list)

    # Played cards, one stack per color
    field: Field = PydanticField(default_factory=Field)

    # Snapshot of the config this game was built from
    num_players: int = PydanticField(ge=2, le=5)
    is_multi: bool = False
    is_grand_finale: bool = False

    @model_validator(mode="after")
    def _players_match_seats(self) -> "Game":
        if len(self.players) != self.num_players:
            raise ValueError(
                f"Expected {self.num_players} players, got {len(self.players)}"
            )
        for i, player in enumerate(self.players):
            if player.player_id != i:
                raise ValueError(f"Player at seat {i} has id {player.player_id}")
        return self

    @model_validator(mode="after")
    def _each_card_in_one_place(self) -> "Game":
        seen: set[CardId] = set()
        for card in self.all_cards():
            if card.id in seen:
                raise ValueError(f"Card {card} ({card.id}) appears more than once")
            seen.add(card.id)
        return self

    @property
    def stack_size(self) -> int:
        return len(self.stack)

    def is_valid_player(self, player: int) -> bool:
        return 0 <= player < self.num_players

    def player(self, player: int) -> PlayerInfo:
        if not self.is_valid_player(player):
            raise InvalidPlayer(player)
        return self.players[player]

    def all_cards(self) -> list[Card]:
        """Every card in the game, wherever it currently sits."""
        cards: list[Card] = []
        for info in self.players:
            cards.extend(info.hand)
        cards.extend(self.stack)
        cards.extend(self.discards)
        for stack in self.field.stacks:
            cards.extend(stack)
        return cards

    def process_action(self, player: int, action: Action) -> RevealedInfo | None:
        """
        Validate and apply one action by ``player``.

        Returns:
            RevealedInfo for an accepted tell, None for discards and plays.

        Raises:
            InvalidPlayer: ``player`` is not seated at this table
            InvalidCard: the card is not in the player's hand, or cannot be played
            IncorrectInfo: the tell targets an unknown player or matches no card

        The game is left unchanged whenever an error is raised.
        """
        return process_action(self, player, action)


def apply_discard(game: Game, player: int, card_id: CardId) -> None:
    """Move a card from the player's hand to the discard pile."""
    info = game.players[player]
    idx = info.card_index(card_id)
    if idx is None:
        raise InvalidCard(card_id)

    card = info.remove_card(idx)
    game.discards.append(card)
    logger.debug("Player %d discarded %s", player, card)


def apply_play(game: Game, player: int, card_id: CardId) -> None:
    """Move a card from the player's hand to the field."""
    info = game.players[player]
    idx = info.card_index(card_id)
    if idx is None:
        raise InvalidCard(card_id)

    # Check the field before the card leaves the hand
    if not game.field.can_add(info.hand[idx]):
        raise InvalidCard(card_id)

    card = info.remove_card(idx)
    placed = game.field.add(card)
    assert placed, f"Field refused {card} after accepting it"
    logger.debug("Player %d played %s", player, card)


def construct_info(game: Game, info: CardInfo) -> frozenset[CardId] | None:
    """Ids of the target's cards matching the hint, or None for an unknown target."""
    if not game.is_valid_player(info.player):
        return None
    return frozenset(
        card.id for card in game.players[info.player].hand if info.kind.matches(card)
    )


def apply_tell(game: Game, player: int, info: CardInfo) -> RevealedInfo:
    """Resolve a hint into the set of cards it touches. Hands are not changed."""
    cards = construct_info(game, info)
    if not cards:
        raise IncorrectInfo(info)

    revealed = RevealedInfo(kind=info.kind, player=info.player, cards=cards)
    logger.debug(
        "Player %d told player %d about %s, touching %d card(s)",
        player, info.player, info.kind, len(cards),
    )
    return revealed


def process_action(game: Game, player: int, action: Action) -> RevealedInfo | None:
    """Dispatch an action after checking the acting player. See Game.process_action."""
    if not game.is_valid_player(player):
        raise InvalidPlayer(player)

    if isinstance(action, DiscardAction):
        apply_discard(game, player, action.card_id)
        return None
    if isinstance(action, PlayAction):
        apply_play(game, player, action.card_id)
        return None
    if isinstance(action, TellAction):
        return apply_tell(game, player, action.info)

    raise TypeError(f"Unknown action type: {type(action)}")
