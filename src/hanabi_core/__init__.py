"""Hanabi rules engine: game state and action validation."""

from .models import (
    Color,
    Number,
    ALL_COLORS,
    ALL_NUMBERS,
    CardId,
    Card,
    Token,
    NumberedToken,
    PlayerInfo,
    Field,
    ColorHint,
    NumberHint,
    CardInfo,
    RevealedInfo,
    TellAction,
    DiscardAction,
    PlayAction,
    Action,
    parse_action,
)
from .errors import (
    HanabiError,
    InvalidCard,
    InvalidPlayer,
    IncorrectInfo,
)
from .deck import (
    build_card_set,
    hand_size,
    prepare_cards,
)
from .game import Game
from .config import GameConfig
from .visibility import (
    view_for_player,
    assert_no_leaks,
)

__all__ = [
    # Models
    "Color",
    "Number",
    "ALL_COLORS",
    "ALL_NUMBERS",
    "CardId",
    "Card",
    "Token",
    "NumberedToken",
    "PlayerInfo",
    "Field",
    "ColorHint",
    "NumberHint",
    "CardInfo",
    "RevealedInfo",
    "TellAction",
    "DiscardAction",
    "PlayAction",
    "Action",
    "parse_action",
    # Errors
    "HanabiError",
    "InvalidCard",
    "InvalidPlayer",
    "IncorrectInfo",
    # Deck
    "build_card_set",
    "hand_size",
    "prepare_cards",
    # Game
    "Game",
    "GameConfig",
    # Visibility
    "view_for_player",
    "assert_no_leaks",
]
