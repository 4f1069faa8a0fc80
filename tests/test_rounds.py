"""Tests for round progression and opponent selection."""

import pytest

from arcade_brawl.config import Side
from arcade_brawl.core.rounds import RoundContext, RoundResult, RoundController
from arcade_brawl.fighters.roster import ROSTER, get_profile, pick_opponent
from arcade_brawl.graphics.stages import STAGES

from tests.helpers import ScriptedRandom


def make_result(winner, round_count=1, difficulty=1.0, cpu_id='nadia-storm',
                previous=()):
    return RoundResult(
        winner=winner,
        player_fighter_id='iron-vega',
        cpu_fighter_id=cpu_id,
        round_count=round_count,
        difficulty_multiplier=difficulty,
        previous_opponents=tuple(previous),
    )


class TestRoundContext:

    def test_defaults(self):
        context = RoundContext()
        assert context.round_count == 1
        assert context.difficulty_multiplier == 1.0
        assert context.previous_opponents == ()

    @pytest.mark.parametrize("kwargs", [
        {'round_count': 0},
        {'difficulty_multiplier': 0.5},
    ])
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            RoundContext(**kwargs)

    def test_history_stored_as_tuple(self):
        context = RoundContext(previous_opponents=['old-bram'])
        assert context.previous_opponents == ('old-bram',)


class TestProgression:

    @pytest.fixture
    def rounds(self):
        return RoundController('iron-vega', rng=ScriptedRandom())

    def test_win_advances_round(self, rounds):
        context = rounds.next_context(make_result(Side.PLAYER, previous=['old-bram']))

        assert context.round_count == 2
        assert context.difficulty_multiplier == 1.2
        assert context.previous_opponents == ('old-bram', 'nadia-storm')

    def test_difficulty_capped(self, rounds):
        context = rounds.next_context(make_result(Side.PLAYER, round_count=11,
                                                  difficulty=2.9))
        assert context.difficulty_multiplier == 3.0

        context = rounds.next_context(make_result(Side.PLAYER, difficulty=3.0))
        assert context.difficulty_multiplier == 3.0

    def test_repeated_wins_do_not_drift(self, rounds):
        difficulty = 1.0
        for round_count in range(1, 6):
            context = rounds.advance(make_result(Side.PLAYER, round_count, difficulty))
            difficulty = context.difficulty_multiplier
        assert difficulty == 2.0

    def test_loss_resets(self, rounds):
        context = rounds.advance(make_result(Side.CPU, round_count=4, difficulty=1.6,
                                             previous=['old-bram']))
        assert context == RoundContext()
        assert rounds.context == RoundContext()

    def test_unknown_player_rejected(self):
        with pytest.raises(KeyError):
            RoundController('nobody')

    def test_setup_match_picks_fresh_opponent_and_stage(self):
        rounds = RoundController(
            'iron-vega',
            RoundContext(previous_opponents=('nadia-storm',)),
            rng=ScriptedRandom(),
        )
        setup = rounds.setup_match()

        assert setup.player_id == 'iron-vega'
        assert setup.cpu_id == 'old-bram'
        assert setup.stage == STAGES[sorted(STAGES)[0]]
        assert setup.context is rounds.context


class TestRoster:

    def test_never_picks_self(self):
        rng = ScriptedRandom()
        assert pick_opponent('iron-vega', (), rng) == 'nadia-storm'

    def test_history_ignored_once_exhausted(self):
        everyone = [fid for fid in ROSTER if fid != 'iron-vega']
        assert pick_opponent('iron-vega', everyone, ScriptedRandom()) == 'nadia-storm'

    def test_unknown_fighter(self):
        with pytest.raises(KeyError):
            get_profile('nobody')
        with pytest.raises(KeyError):
            pick_opponent('nobody')
