"""Screen state for selecting players and making teams."""

import asyncio
import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from team_maker.models.player import Player
from team_maker.models.team import TeamAssignment
from team_maker.services.roster_store import RosterStore
from team_maker.services.team_assigner import (
    MIN_PLAYERS,
    InsufficientPlayersError,
    assign_teams,
)

logger = logging.getLogger(__name__)


class TeamsInProgressError(RuntimeError):
    """Raised when "make teams" is triggered while a run is still pending."""


@dataclass
class ScreenState:
    """Point-in-time view of everything the screen renders."""

    players: list[Player]
    selected_count: int
    min_players: int
    is_loading: bool
    assignment: Optional[TeamAssignment] = None

    @property
    def can_make_teams(self) -> bool:
        return self.selected_count >= self.min_players


@dataclass
class TeamMakerService:
    """Owns the roster, the loading flag and the latest team assignment."""

    roster: RosterStore = field(default_factory=RosterStore)
    min_players: int = MIN_PLAYERS
    delay_seconds: float = 0.5
    rng: Optional[random.Random] = None

    assignment: Optional[TeamAssignment] = field(default=None, init=False)
    is_loading: bool = field(default=False, init=False)

    def toggle(self, player_id: str) -> Optional[Player]:
        """Flip one player's selection. The last assignment stays on screen."""
        return self.roster.toggle(player_id)

    @property
    def can_make_teams(self) -> bool:
        return self.roster.selected_count >= self.min_players

    async def make_teams(self) -> TeamAssignment:
        """Split the current selection into teams after the cosmetic delay.

        The selection is captured before the delay, so toggles made while
        the run is pending do not affect its result.

        Raises:
            TeamsInProgressError: A previous run has not finished yet
            InsufficientPlayersError: Fewer than ``min_players`` are selected
        """
        if self.is_loading:
            raise TeamsInProgressError("Teams are already being made")

        selected = self.roster.selected_players()
        if len(selected) < self.min_players:
            logger.warning(
                f"Make teams rejected: {len(selected)} selected, "
                f"{self.min_players} required"
            )
            raise InsufficientPlayersError(len(selected), self.min_players)

        self.is_loading = True
        try:
            if self.delay_seconds > 0:
                await asyncio.sleep(self.delay_seconds)
            assignment = assign_teams(selected, rng=self.rng, min_players=self.min_players)
        finally:
            self.is_loading = False

        self.assignment = assignment
        return assignment

    def snapshot(self) -> ScreenState:
        return ScreenState(
            players=self.roster.players,
            selected_count=self.roster.selected_count,
            min_players=self.min_players,
            is_loading=self.is_loading,
            assignment=self.assignment,
        )
