"""Random split of selected players into two equal teams."""

import logging
import random
from typing import Optional, Sequence

from team_maker.models.player import Player
from team_maker.models.team import TeamAssignment

logger = logging.getLogger(__name__)

MIN_PLAYERS = 4


class InsufficientPlayersError(ValueError):
    """Raised when too few players are selected to make two teams."""

    def __init__(self, selected: int, required: int = MIN_PLAYERS):
        self.selected = selected
        self.required = required
        super().__init__(f"Select at least {required} players")


def assign_teams(
    players: Sequence[Player],
    rng: Optional[random.Random] = None,
    min_players: int = MIN_PLAYERS,
) -> TeamAssignment:
    """Split players into two equal, randomly composed teams.

    With an odd count the last player (in the given order) is held out as
    the leftover before shuffling. The remaining players are shuffled
    uniformly and cut at the midpoint: first half is team A, second half
    team B. ``players`` is not modified.

    Args:
        players: The selected players, in roster order
        rng: Random source; defaults to the module-level generator
        min_players: Smallest selection that may be split

    Returns:
        A new TeamAssignment

    Raises:
        InsufficientPlayersError: Fewer than ``min_players`` were given
    """
    if len(players) < min_players:
        raise InsufficientPlayersError(len(players), min_players)

    pool = list(players)
    leftover = pool.pop() if len(pool) % 2 else None

    (rng or random).shuffle(pool)
    midpoint = len(pool) // 2

    assignment = TeamAssignment(
        team_a=pool[:midpoint],
        team_b=pool[midpoint:],
        leftover=leftover,
    )
    logger.info(
        f"Assigned {len(players)} players: {assignment.team_size} per team"
        + (f", common player {leftover.name}" if leftover else "")
    )
    return assignment
