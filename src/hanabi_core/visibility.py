"""Visibility and view generation for Hanabi.

Core principle: A player can see ALL other players' hands but NOT their own cards.
Of their own hand they see only card ids, which is what tells refer to.
The draw stack is visible to nobody; only its size is public.
"""

from __future__ import annotations

from typing import Any

from .deck import card_colors
from .errors import InvalidPlayer
from .game import Game
from .models import Card


# Keys that must NEVER appear in any player view
FORBIDDEN_KEYS = {
    "stack",
    "deck",
    "deck_order",
    "rng",
    "seed",
    "random",
    "debug",
    "_internal",
}

# Keys holding a player's actual cards, which a view only exposes for others
HAND_KEYS = {"hand", "my_hand", "own_hand"}


def _public_card(card: Card) -> dict[str, Any]:
    return {"id": str(card.id), "color": card.color.value, "number": int(card.number)}


def view_for_player(game: Game, player: int) -> dict[str, Any]:
    """
    Build the redacted game view for a specific player.

    Args:
        game: Current game
        player: The player requesting the view

    Returns:
        Redacted view dictionary safe for the player to see
    """
    if not game.is_valid_player(player):
        raise InvalidPlayer(player)

    # Build visible hands - all players EXCEPT the requesting player
    visible_hands: dict[int, list[dict[str, Any]]] = {
        info.player_id: [_public_card(card) for card in info.hand]
        for info in game.players
        if info.player_id != player
    }

    # Own hand: ids only, so tells can be matched to positions
    my_card_ids = [str(card.id) for card in game.players[player].hand]

    field = {
        color.value: [int(card.number) for card in game.field.stack(color)]
        for color in card_colors(game.is_multi)
    }

    return {
        "role": "player",
        "player_id": player,
        "num_players": game.num_players,
        "is_multi": game.is_multi,
        "is_grand_finale": game.is_grand_finale,

        # Other players' hands - VISIBLE
        "visible_hands": visible_hands,

        # Own hand - identities only, NOT colors or numbers
        "my_card_ids": my_card_ids,

        # Public game state
        "field": field,
        "discards": [_public_card(card) for card in game.discards],
        "stack_remaining": game.stack_size,
    }


def _entries(payload: Any, path: str = ""):
    """Yield (path, key, value) for every dict entry in a nested payload."""
    if isinstance(payload, dict):
        for key, value in payload.items():
            current_path = f"{path}.{key}" if path else str(key)
            yield current_path, str(key).lower(), value
            yield from _entries(value, current_path)
    elif isinstance(payload, (list, tuple)):
        for i, item in enumerate(payload):
            yield from _entries(item, f"{path}[{i}]")


def assert_no_leaks(payload: Any) -> None:
    """
    Assert that a payload carries no hidden information.

    Rejects forbidden keys and raw hands at any depth, and own-hand entries
    that are anything but card ids. Raises AssertionError on the first leak.
    """
    for path, key, value in _entries(payload):
        if key in FORBIDDEN_KEYS:
            raise AssertionError(f"Forbidden key '{key}' found at {path}")
        if key in HAND_KEYS:
            raise AssertionError(f"Raw hand found at {path}")
        if key == "my_card_ids" and not all(isinstance(v, str) for v in value):
            raise AssertionError(f"Card data found at {path} - LEAK!")


def assert_view_safe(view: dict[str, Any]) -> None:
    """
    Validate that a player view is safe (no information leaks).

    Checks:
    1. No forbidden keys anywhere in the payload
    2. Player's own cards are not directly visible
    3. Own hand is listed by id only
    """
    if not isinstance(view, dict):
        raise AssertionError("View must be a dictionary")

    if view.get("role") != "player":
        raise AssertionError(f"Unknown role in view: {view.get('role')}")

    player = view.get("player_id")
    if player is None:
        raise AssertionError("View missing player_id")

    visible_hands = view.get("visible_hands", {})
    if player in visible_hands:
        raise AssertionError(f"Player {player}'s own hand found in visible_hands - LEAK!")

    assert_no_leaks(view)


def get_hint_targets(game: Game, player: int) -> list[int]:
    """Players that ``player`` may sensibly tell (everyone except self)."""
    return [info.player_id for info in game.players if info.player_id != player]
