"""
Player Controller
=================
Translates logical key state into fighter transitions and moves.

Punch, kick, defence and jump fire on the press edge only. Duck is
level-triggered: held down means ducking, release means idle.
"""

from arcade_brawl.config import (
    FighterState, JumpDirection, ATTACK_BY_STATE,
    TAP_STEP, HOLD_STEP, JUMP_STEP
)
from arcade_brawl.core.keys import KeyState, EdgeDetector
from arcade_brawl.core.scheduler import Scheduler
from arcade_brawl.fighters.fighter import Fighter
from arcade_brawl.fighters.movement import PositionResolver
from arcade_brawl.combat.engine import CombatEngine

# States in which walking input is ignored
NO_WALK_STATES = frozenset({
    FighterState.JUMP, FighterState.JUMP_KICK,
    FighterState.DEFENCE, FighterState.DUCK,
})


class PlayerController:
    """Drives the player fighter from keyboard state"""

    def __init__(self, fighter: Fighter, opponent: Fighter,
                 scheduler: Scheduler, resolver: PositionResolver,
                 combat: CombatEngine):
        self.fighter = fighter
        self.opponent = opponent
        self.scheduler = scheduler
        self.resolver = resolver
        self.combat = combat
        self.edges = EdgeDetector()

    @property
    def keys(self) -> KeyState:
        return self.edges.current

    def handle_input(self, key_state: KeyState):
        """Process one key state sample"""
        self.edges.update(key_state)
        edges = self.edges

        # Single taps
        if edges.pressed('left'):
            self._tap(-1)
        if edges.pressed('right'):
            self._tap(1)
        if not key_state.any_direction:
            self.fighter.is_walking = False

        # Jump first, so up+kick on one sample becomes a jump kick
        if edges.pressed('up'):
            self._jump(key_state)

        if key_state.down:
            self.fighter.request_transition(FighterState.DUCK, self.scheduler)
        elif self.fighter.is_ducking:
            self.fighter.release_duck()

        if edges.pressed('punch'):
            self._attack(FighterState.PUNCH)
        if edges.pressed('kick'):
            self._attack(FighterState.KICK)
        if edges.pressed('defence'):
            self.fighter.request_transition(FighterState.DEFENCE, self.scheduler)

    def hold_tick(self):
        """Periodic: continuous walking while a direction is held"""
        keys = self.keys

        if keys.down and self.fighter.is_idle:
            self.fighter.request_transition(FighterState.DUCK, self.scheduler)

        if not keys.any_direction or self.fighter.state in NO_WALK_STATES:
            return

        direction = 1 if keys.right else -1
        if self.fighter.is_idle:
            self.fighter.is_walking = True
        self.resolver.try_move(self.fighter, self.opponent, direction * HOLD_STEP)

    def _tap(self, direction: int):
        if self.fighter.state in NO_WALK_STATES:
            return
        if self.fighter.is_idle:
            self.fighter.is_walking = True
        self.resolver.try_move(self.fighter, self.opponent, direction * TAP_STEP)

    def _jump(self, key_state: KeyState):
        if not self.fighter.request_transition(FighterState.JUMP, self.scheduler):
            return

        if key_state.left:
            self.fighter.jump_direction = JumpDirection.LEFT
            self.resolver.try_move(self.fighter, self.opponent, -JUMP_STEP)
        elif key_state.right:
            self.fighter.jump_direction = JumpDirection.RIGHT
            self.resolver.try_move(self.fighter, self.opponent, JUMP_STEP)

    def _attack(self, state: FighterState):
        if not self.fighter.request_transition(state, self.scheduler):
            return

        # KICK in the air has become JUMP_KICK by now
        kind = ATTACK_BY_STATE[self.fighter.state]
        self.combat.resolve_attack(self.fighter, self.opponent, kind)
