"""REST endpoints for the team maker screen."""

import logging

from fastapi import APIRouter, HTTPException, Request

from team_maker.config import settings
from team_maker.models.player import Player
from team_maker.models.team import TeamAssignment
from team_maker.services.team_assigner import InsufficientPlayersError
from team_maker.services.team_maker_service import (
    ScreenState,
    TeamMakerService,
    TeamsInProgressError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/team-maker", tags=["team-maker"])


def _get_or_create_service(request: Request) -> TeamMakerService:
    """Get the screen service from app state, creating it on first use."""
    if not hasattr(request.app.state, "team_maker"):
        request.app.state.team_maker = TeamMakerService(
            min_players=settings.min_players,
            delay_seconds=settings.team_delay_seconds,
        )
    return request.app.state.team_maker


@router.get("/state")
async def get_state(request: Request):
    """Everything the screen shows: roster, selection and current teams."""
    service = _get_or_create_service(request)
    return _serialize_state(service.snapshot())


@router.get("/players")
async def list_players(request: Request):
    service = _get_or_create_service(request)
    return [_serialize_player(p) for p in service.roster.players]


@router.post("/players/{player_id}/toggle")
async def toggle_player(request: Request, player_id: str):
    """Select or deselect a player. Unknown ids leave the roster unchanged."""
    service = _get_or_create_service(request)
    service.toggle(player_id)
    return _serialize_state(service.snapshot())


@router.post("/teams", status_code=201)
async def make_teams(request: Request):
    """Split the selected players into Team A, Team B and a common player."""
    service = _get_or_create_service(request)
    try:
        await service.make_teams()
    except InsufficientPlayersError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except TeamsInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return _serialize_state(service.snapshot())


@router.get("/teams")
async def get_teams(request: Request):
    """Latest assignment, or null before teams have been made."""
    service = _get_or_create_service(request)
    if service.assignment is None:
        return None
    return _serialize_assignment(service.assignment)


# Helper functions

def _serialize_player(player: Player) -> dict:
    return {
        "id": player.id,
        "name": player.name,
        "role": player.role.value,
        "selected": player.selected,
    }


def _serialize_assignment(assignment: TeamAssignment) -> dict:
    """Serialize TeamAssignment to dict."""
    return {
        "team_a": [_serialize_player(p) for p in assignment.team_a],
        "team_b": [_serialize_player(p) for p in assignment.team_b],
        "common_player": (
            _serialize_player(assignment.leftover) if assignment.leftover else None
        ),
    }


def _serialize_state(state: ScreenState) -> dict:
    return {
        "players": [_serialize_player(p) for p in state.players],
        "selected_count": state.selected_count,
        "min_players": state.min_players,
        "can_make_teams": state.can_make_teams,
        "is_loading": state.is_loading,
        "teams": _serialize_assignment(state.assignment) if state.assignment else None,
    }
