"""
Round progression
=================
Round context passed into a match, and the result handed back when it ends.
"""

import random
from dataclasses import dataclass, field
from typing import Tuple, Dict, Optional

from arcade_brawl.config import (
    Side, DEFAULT_DIFFICULTY, DIFFICULTY_STEP, MAX_DIFFICULTY
)
from arcade_brawl.fighters.roster import pick_opponent, get_profile
from arcade_brawl.graphics.stages import Stage, pick_stage


@dataclass(frozen=True)
class RoundContext:
    """Read-only to the match"""
    round_count: int = 1
    difficulty_multiplier: float = DEFAULT_DIFFICULTY
    previous_opponents: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.round_count < 1:
            raise ValueError(f"round_count must be >= 1, got {self.round_count}")
        if self.difficulty_multiplier < 1:
            raise ValueError(
                f"difficulty_multiplier must be >= 1, got {self.difficulty_multiplier}"
            )
        # Accept any iterable but always store a tuple
        object.__setattr__(self, 'previous_opponents', tuple(self.previous_opponents))


@dataclass(frozen=True)
class RoundResult:
    """Delivered to the round controller after the match ends"""
    winner: Side
    player_fighter_id: str
    cpu_fighter_id: str
    round_count: int
    difficulty_multiplier: float
    previous_opponents: Tuple[str, ...]
    player_stats: Dict[str, int] = field(default_factory=dict)
    cpu_stats: Dict[str, int] = field(default_factory=dict)

    @property
    def player_won(self) -> bool:
        return self.winner == Side.PLAYER


@dataclass(frozen=True)
class MatchSetup:
    """Everything needed to start the next match"""
    context: RoundContext
    player_id: str
    cpu_id: str
    stage: Stage


class RoundController:
    """
    Owns round count, difficulty and opponent history between matches.
    Win: next round, +0.2 difficulty, opponent added to history.
    Loss: back to round 1.
    """

    def __init__(self, player_id: str, context: Optional[RoundContext] = None,
                 rng: Optional[random.Random] = None):
        get_profile(player_id)
        self.player_id = player_id
        self.context = context or RoundContext()
        self.rng = rng or random.Random()

    def next_context(self, result: RoundResult) -> RoundContext:
        """Context for the match after result"""
        if result.player_won:
            difficulty = min(
                round(result.difficulty_multiplier + DIFFICULTY_STEP, 1),
                MAX_DIFFICULTY
            )
            return RoundContext(
                round_count=result.round_count + 1,
                difficulty_multiplier=difficulty,
                previous_opponents=result.previous_opponents + (result.cpu_fighter_id,),
            )
        return RoundContext()

    def advance(self, result: RoundResult) -> RoundContext:
        self.context = self.next_context(result)
        return self.context

    def setup_match(self) -> MatchSetup:
        """Pick opponent and stage for the current context"""
        cpu_id = pick_opponent(
            self.player_id, self.context.previous_opponents, self.rng
        )
        return MatchSetup(
            context=self.context,
            player_id=self.player_id,
            cpu_id=cpu_id,
            stage=pick_stage(self.rng),
        )
