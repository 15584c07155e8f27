"""In-memory roster with per-player selection flags."""

import logging
from dataclasses import replace
from typing import Iterable, Optional

from team_maker.models.player import Player, PlayerRole

logger = logging.getLogger(__name__)

# (id, name, role) for the squad shown on the screen
DEFAULT_ROSTER: list[tuple[str, str, PlayerRole]] = [
    ("1", "Niraj", PlayerRole.BOWLER),
    ("2", "Keshav", PlayerRole.GOOD_PLAYER),
    ("3", "Lalan", PlayerRole.AVERAGE_PLAYER),
    ("4", "Harshit", PlayerRole.GOOD_PLAYER),
    ("5", "Vishnu", PlayerRole.BOWLER),
    ("6", "Abhishek", PlayerRole.GOOD_PLAYER),
    ("7", "Nishant", PlayerRole.AVERAGE_PLAYER),
    ("8", "Gaurav", PlayerRole.GOOD_PLAYER),
    ("9", "Aman", PlayerRole.GOOD_PLAYER),
    ("10", "Sujal", PlayerRole.AVERAGE_PLAYER),
    ("11", "Lokesh", PlayerRole.GOOD_PLAYER),
    ("12", "Aryan", PlayerRole.GOOD_PLAYER),
    ("13", "Amandeep", PlayerRole.GOOD_PLAYER),
    ("14", "Krishna", PlayerRole.AVERAGE_PLAYER),
    ("15", "Raj", PlayerRole.AVERAGE_PLAYER),
    ("16", "Vasu", PlayerRole.UNKNOWN),
]


def default_players() -> list[Player]:
    """Build a fresh, fully unselected copy of the default roster."""
    return [Player(id=pid, name=name, role=role) for pid, name, role in DEFAULT_ROSTER]


class RosterStore:
    """Holds the fixed roster and which players are selected.

    The roster never grows or shrinks; the only mutation is flipping one
    player's ``selected`` flag. Toggled players are swapped for new Player
    objects, so lists handed out earlier (e.g. inside a TeamAssignment)
    keep the state they had when they were taken.
    """

    def __init__(self, players: Optional[Iterable[Player]] = None):
        self._players: list[Player] = (
            list(players) if players is not None else default_players()
        )
        ids = [p.id for p in self._players]
        if len(ids) != len(set(ids)):
            raise ValueError("Roster player ids must be unique")

    @property
    def players(self) -> list[Player]:
        """All players in roster order."""
        return list(self._players)

    def get_player(self, player_id: str) -> Optional[Player]:
        return next((p for p in self._players if p.id == player_id), None)

    def toggle(self, player_id: str) -> Optional[Player]:
        """Flip the selection flag of one player.

        Returns the updated player, or None when the id is not on the roster
        (nothing changes in that case).
        """
        for index, player in enumerate(self._players):
            if player.id == player_id:
                updated = replace(player, selected=not player.selected)
                self._players[index] = updated
                logger.info(
                    f"Player {updated.name} ({updated.id}) "
                    f"{'selected' if updated.selected else 'deselected'}"
                )
                return updated

        logger.debug(f"Toggle ignored for unknown player id {player_id!r}")
        return None

    def selected_players(self) -> list[Player]:
        """Selected players in roster order."""
        return [p for p in self._players if p.selected]

    @property
    def selected_count(self) -> int:
        return sum(1 for p in self._players if p.selected)

    def __len__(self) -> int:
        return len(self._players)
