"""Tests for the team maker screen service."""

import asyncio
import random

import pytest

from team_maker.services.team_assigner import InsufficientPlayersError
from team_maker.services.team_maker_service import TeamMakerService, TeamsInProgressError

pytestmark = pytest.mark.anyio


@pytest.fixture
def service():
    return TeamMakerService(delay_seconds=0, rng=random.Random(0))


def _select(service, *ids):
    for pid in ids:
        service.toggle(pid)


async def test_make_teams_publishes_assignment(service):
    _select(service, "1", "2", "3", "4", "5")

    assignment = await service.make_teams()

    assert service.assignment is assignment
    assert assignment.leftover.id == "5"
    assert assignment.team_size == 2
    assert service.is_loading is False


async def test_make_teams_rejects_small_selection(service):
    _select(service, "1", "2", "3")

    with pytest.raises(InsufficientPlayersError):
        await service.make_teams()

    assert service.assignment is None
    assert service.is_loading is False


async def test_failed_run_keeps_previous_assignment(service):
    _select(service, "1", "2", "3", "4")
    previous = await service.make_teams()

    service.toggle("4")
    with pytest.raises(InsufficientPlayersError):
        await service.make_teams()

    assert service.assignment is previous


async def test_rerun_replaces_assignment(service):
    _select(service, "1", "2", "3", "4", "5", "6")
    first = await service.make_teams()

    service.toggle("7")
    second = await service.make_teams()

    assert service.assignment is second
    assert second is not first
    assert second.leftover.id == "7"


async def test_toggle_keeps_last_assignment_on_screen(service):
    _select(service, "1", "2", "3", "4")
    assignment = await service.make_teams()

    service.toggle("1")

    assert service.assignment is assignment
    assert service.snapshot().selected_count == 3


async def test_loading_flag_set_during_delay():
    service = TeamMakerService(delay_seconds=0.05)
    _select(service, "1", "2", "3", "4")

    task = asyncio.create_task(service.make_teams())
    await asyncio.sleep(0)
    assert service.is_loading is True
    assert service.snapshot().is_loading is True

    await task
    assert service.is_loading is False


async def test_second_run_while_loading_is_rejected():
    service = TeamMakerService(delay_seconds=0.05)
    _select(service, "1", "2", "3", "4")

    task = asyncio.create_task(service.make_teams())
    await asyncio.sleep(0)
    with pytest.raises(TeamsInProgressError):
        await service.make_teams()

    await task
    assert service.assignment is not None


async def test_selection_is_captured_before_delay():
    """Toggles made while teams are pending do not change the result."""
    service = TeamMakerService(delay_seconds=0.05)
    _select(service, "1", "2", "3", "4")

    task = asyncio.create_task(service.make_teams())
    await asyncio.sleep(0)
    service.toggle("9")
    assignment = await task

    ids = {p.id for p in assignment.team_a + assignment.team_b}
    assert ids == {"1", "2", "3", "4"}
    assert assignment.leftover is None


async def test_snapshot_reports_can_make_teams(service):
    assert service.snapshot().can_make_teams is False

    _select(service, "1", "2", "3", "4")

    state = service.snapshot()
    assert state.can_make_teams is True
    assert service.can_make_teams is True
    assert state.min_players == 4
    assert len(state.players) == 16
