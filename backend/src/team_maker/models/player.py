"""Player and role models."""

from dataclasses import dataclass
from enum import Enum


class PlayerRole(str, Enum):
    """Static playing role, stored as its display label."""

    BOWLER = "Bowler"
    GOOD_PLAYER = "Good Player"
    AVERAGE_PLAYER = "Average Player"
    UNKNOWN = "Unknown Player"


@dataclass
class Player:
    """A player on the roster."""

    id: str
    name: str
    role: PlayerRole
    selected: bool = False
