"""Shared fixtures for the simulation tests."""

import pytest

from arcade_brawl.config import Side
from arcade_brawl.core.scheduler import Scheduler
from arcade_brawl.fighters.fighter import Fighter
from arcade_brawl.fighters.movement import PositionResolver
from arcade_brawl.combat.engine import CombatEngine

# Small arena: player starts at center 220, CPU at center 280
VIEWPORT = 500
PLAYER_ID = 'iron-vega'
CPU_ID = 'nadia-storm'


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def player():
    return Fighter(PLAYER_ID, Side.PLAYER, VIEWPORT)


@pytest.fixture
def cpu():
    return Fighter(CPU_ID, Side.CPU, VIEWPORT)


@pytest.fixture
def resolver():
    return PositionResolver(VIEWPORT)


@pytest.fixture
def combat(scheduler):
    return CombatEngine(scheduler)
