"""Data models for the Hanabi rules engine."""

from __future__ import annotations

import json
from enum import Enum
from typing import Annotated, Any, Literal
from uuid import UUID

from pydantic import BaseModel, TypeAdapter, field_serializer, field_validator
from pydantic import Field as PydanticField


class Color(str, Enum):
    """Card colors, in catalog order."""
    WHITE = "white"
    RED = "red"
    BLUE = "blue"
    YELLOW = "yellow"
    GREEN = "green"
    MULTI = "multi"

    @property
    def stack_index(self) -> int:
        """Dense index (0..5) addressing this color's stack on the field."""
        return _COLOR_INDEX[self]


class Number(int, Enum):
    """Card ranks."""
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5


ALL_COLORS: list[Color] = list(Color)
ALL_NUMBERS: list[Number] = list(Number)

_COLOR_INDEX: dict[Color, int] = {color: i for i, color in enumerate(ALL_COLORS)}

# Identity of a physical card. Never derived from color or number.
CardId = UUID


class Card(BaseModel):
    """A Hanabi card. Two cards with equal color and number differ by id."""

    model_config = {"frozen": True}

    number: Number
    color: Color
    id: CardId

    def __str__(self) -> str:
        return f"{self.color.value[0].upper()}{int(self.number)}"


class Token(str, Enum):
    """Token kinds: blue for hints, red for fuses."""
    BLUE = "blue"
    RED = "red"


class NumberedToken(BaseModel):
    """A pile of tokens of one kind."""

    num: int = PydanticField(ge=0)
    kind: Token


class PlayerInfo(BaseModel):
    """A seat at the table and the cards held in it."""

    player_id: int = PydanticField(ge=0)
    hand: list[Card] = PydanticField(default_factory=list)

    def card_index(self, card_id: CardId) -> int | None:
        """Position of the card with this id in the hand, or None."""
        for i, card in enumerate(self.hand):
            if card.id == card_id:
                return i
        return None

    def remove_card(self, index: int) -> Card:
        """Remove and return the card at ``index``. Raises IndexError if out of range."""
        return self.hand.pop(index)


class Field(BaseModel):
    """Per-color stacks of played cards, each ascending from 1 without gaps."""

    stacks: list[list[Card]] = PydanticField(
        default_factory=lambda: [[] for _ in ALL_COLORS]
    )

    @field_validator("stacks")
    @classmethod
    def _one_stack_per_color(cls, value: list[list[Card]]) -> list[list[Card]]:
        if len(value) != len(ALL_COLORS):
            raise ValueError(
                f"Field needs {len(ALL_COLORS)} stacks, got {len(value)}"
            )
        for color, stack in zip(ALL_COLORS, value):
            for position, card in enumerate(stack, start=1):
                if card.color != color:
                    raise ValueError(f"{card} is on the {color.value} stack")
                if card.number != position:
                    raise ValueError(
                        f"{color.value} stack must ascend from 1 without gaps, "
                        f"found {card} at position {position}"
                    )
        return value

    def stack(self, color: Color) -> list[Card]:
        return self.stacks[color.stack_index]

    def next_number(self, color: Color) -> int:
        """The only rank that can be placed on this color next (6 once complete)."""
        stack = self.stack(color)
        return stack[-1].number + 1 if stack else 1

    def can_add(self, card: Card) -> bool:
        return card.number == self.next_number(card.color)

    def add(self, card: Card) -> bool:
        """Place a card if it continues its color's stack. Returns False otherwise."""
        if not self.can_add(card):
            return False
        self.stacks[card.color.stack_index].append(card)
        return True


# Hint kinds

class ColorHint(BaseModel):
    """Hint about every card of one color."""

    kind: Literal["color"] = "color"
    color: Color

    def matches(self, card: Card) -> bool:
        return card.color == self.color


class NumberHint(BaseModel):
    """Hint about every card of one number."""

    kind: Literal["number"] = "number"
    number: Number

    def matches(self, card: Card) -> bool:
        return card.number == self.number


HintKind = Annotated[ColorHint | NumberHint, PydanticField(discriminator="kind")]


class CardInfo(BaseModel):
    """What to tell, and to whom. The matching cards are computed by the game."""

    kind: HintKind
    player: int


class RevealedInfo(BaseModel):
    """Public result of an accepted tell: the ids of every matching card."""

    kind: HintKind
    player: int
    cards: frozenset[CardId]

    @field_validator("cards")
    @classmethod
    def _non_empty(cls, value: frozenset[CardId]) -> frozenset[CardId]:
        if not value:
            raise ValueError("A hint must touch at least one card")
        return value

    @field_serializer("cards")
    def serialize_cards(self, value: frozenset[CardId]) -> list[str]:
        """Sorted list so dumps are stable."""
        return sorted(str(card_id) for card_id in value)


# Action types

class TellAction(BaseModel):
    """Give a hint to a player."""

    action_type: Literal["tell"] = "tell"
    info: CardInfo


class DiscardAction(BaseModel):
    """Discard a card from the acting player's hand."""

    action_type: Literal["discard"] = "discard"
    card_id: CardId


class PlayAction(BaseModel):
    """Play a card from the acting player's hand onto the field."""

    action_type: Literal["play"] = "play"
    card_id: CardId


Action = Annotated[
    TellAction | DiscardAction | PlayAction,
    PydanticField(discriminator="action_type"),
]

ACTION_ADAPTER: TypeAdapter[Any] = TypeAdapter(Action)


def parse_action(payload: str | bytes | dict[str, Any]) -> TellAction | DiscardAction | PlayAction:
    """
    Validate a transport payload into an action.

    Accepts a decoded dict or a JSON document. Raises pydantic.ValidationError
    for anything that is not a well-formed action.
    """
    if isinstance(payload, (str, bytes)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ValueError(f"Action payload is not valid JSON: {e}") from e
    return ACTION_ADAPTER.validate_python(payload)
