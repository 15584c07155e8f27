"""Data models for the team maker."""

from team_maker.models.player import Player, PlayerRole
from team_maker.models.team import TeamAssignment

__all__ = [
    "Player",
    "PlayerRole",
    "TeamAssignment",
]
