"""Deck preparation: build the card set, shuffle, and deal starting hands."""

from __future__ import annotations

import random
import uuid

from .models import ALL_COLORS, ALL_NUMBERS, Card, CardId, Color


def new_card_id(rng: random.Random) -> CardId:
    """Random version 4 UUID drawn from ``rng`` so seeded decks keep their ids."""
    return uuid.UUID(int=rng.getrandbits(128), version=4)


def card_colors(is_multi: bool) -> list[Color]:
    """Colors in play: every color normally, all but multi in the multi variant."""
    if is_multi:
        return ALL_COLORS[:5]
    return list(ALL_COLORS)


def build_card_set(is_multi: bool, rng: random.Random) -> list[Card]:
    """One card for each (color, number) pair of the variant, in catalog order."""
    return [
        Card(color=color, number=number, id=new_card_id(rng))
        for color in card_colors(is_multi)
        for number in ALL_NUMBERS
    ]


def hand_size(num_players: int) -> int:
    """5 cards each for 2-3 players, 4 for 4-5 players."""
    return 5 if num_players <= 3 else 4


def prepare_cards(
    num_players: int,
    is_multi: bool,
    rng: random.Random | None = None,
) -> tuple[list[list[Card]], list[Card]]:
    """
    Shuffle a fresh card set and deal starting hands.

    Args:
        num_players: Number of hands to deal
        is_multi: Whether the multi variant is in play
        rng: Source of randomness. A fresh unseeded Random when None.

    Returns:
        (hands indexed by player, remaining draw stack)
    """
    if rng is None:
        rng = random.Random()

    cards = build_card_set(is_multi, rng)
    rng.shuffle(cards)

    size = hand_size(num_players)
    if size * num_players > len(cards):
        raise ValueError(
            f"Cannot deal {size} cards to {num_players} players from {len(cards)} cards"
        )

    # Deal round-robin from the top of the shuffled pile
    hands: list[list[Card]] = [[] for _ in range(num_players)]
    for _ in range(size):
        for hand in hands:
            hand.append(cards.pop())

    return hands, cards
