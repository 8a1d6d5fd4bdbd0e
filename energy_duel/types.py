"""Common type aliases and enumerations."""

from enum import StrEnum, auto


PlayerID = str
ItemID = str


class ItemKind(StrEnum):
    """What an item does when used."""

    FOOD = auto()
    WEAPON = auto()


class Outcome(StrEnum):
    """Final standing of a player once the game is over."""

    WINNER = auto()
    LOSER = auto()


MAX_ENERGY = 100
RESTART_ENERGY = 50
EAT_AMOUNT = 10
ATTACK_AMOUNT = 5
