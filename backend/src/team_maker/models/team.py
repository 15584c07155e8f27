"""Team assignment model."""

from dataclasses import dataclass, field
from typing import Optional

from team_maker.models.player import Player


@dataclass
class TeamAssignment:
    """Result of one "make teams" run.

    Built fresh on every run and replaced wholesale; both teams always hold
    the same number of players. ``leftover`` is the common player set aside
    when an odd number of players was selected.
    """

    team_a: list[Player] = field(default_factory=list)
    team_b: list[Player] = field(default_factory=list)
    leftover: Optional[Player] = None

    @property
    def team_size(self) -> int:
        return len(self.team_a)

    @property
    def player_count(self) -> int:
        """Players covered by this assignment, leftover included."""
        return len(self.team_a) + len(self.team_b) + (1 if self.leftover else 0)
