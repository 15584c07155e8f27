"""Business logic services."""

from team_maker.services.roster_store import (
    DEFAULT_ROSTER,
    RosterStore,
    default_players,
)
from team_maker.services.team_assigner import (
    MIN_PLAYERS,
    InsufficientPlayersError,
    assign_teams,
)
from team_maker.services.team_maker_service import (
    ScreenState,
    TeamMakerService,
    TeamsInProgressError,
)

__all__ = [
    "DEFAULT_ROSTER",
    "RosterStore",
    "default_players",
    "MIN_PLAYERS",
    "InsufficientPlayersError",
    "assign_teams",
    "ScreenState",
    "TeamMakerService",
    "TeamsInProgressError",
]
