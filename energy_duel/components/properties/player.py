from dataclasses import dataclass


@dataclass(frozen=True)
class Player:
    """Display identity of a duelist.

    Attributes:
        name:
            Name shown in the UI and the game log.
    """

    name: str
