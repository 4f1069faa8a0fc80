"""
Arcade Brawl - Configuration & Constants
========================================
All simulation settings, timings, colors, and enums in one place.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
GAME_TITLE = "ARCADE BRAWL"

# =============================================================================
# COLORS
# =============================================================================

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)
DARK_GRAY = (40, 40, 40)
LIGHT_GRAY = (180, 180, 180)

RED = (220, 50, 50)
DARK_RED = (150, 30, 30)
GREEN = (50, 200, 50)
BLUE = (50, 100, 200)
DARK_BLUE = (30, 60, 150)
YELLOW = (230, 200, 50)
ORANGE = (230, 150, 50)
GOLD = (255, 215, 0)

# UI colors
UI_BG = (20, 20, 30)
HEALTH_GREEN = (50, 200, 50)
HEALTH_YELLOW = (200, 200, 50)
HEALTH_RED = (200, 50, 50)
HIT_FLASH = (255, 255, 255)
DEFENCE_TINT = (120, 170, 255)

# =============================================================================
# ARENA SETTINGS
# =============================================================================

FLOOR_Y = 600          # Where fighters stand
JUMP_HEIGHT = 120      # Visual only, simulation is 1-D

# Home-edge offset bounds: [EDGE_MIN_OFFSET, viewport - EDGE_MAX_MARGIN]
EDGE_MIN_OFFSET = 50
EDGE_MAX_MARGIN = 150

# =============================================================================
# FIGHTER SETTINGS
# =============================================================================

MAX_HEALTH = 100
START_OFFSET = 150     # Distance from each fighter's own home edge

# Sprite width; center_x is offset + half of it
FIGHTER_WIDTH = 140
FIGHTER_HALF_WIDTH = FIGHTER_WIDTH // 2
FIGHTER_HEIGHT = 220

# Collision boxes (player sedikit lebih lebar dari CPU)
PLAYER_COLLISION_WIDTH = 100
CPU_COLLISION_WIDTH = 90

# Movement steps
TAP_STEP = 20          # single key edge
HOLD_STEP = 10         # every HOLD_TICK_MS while held
JUMP_STEP = 50         # directional jump displacement
CPU_STEP = 15

# =============================================================================
# TIMING (milliseconds)
# =============================================================================

PUNCH_DURATION_MS = 300
KICK_DURATION_MS = 400
DEFENCE_DURATION_MS = 500
JUMP_DURATION_MS = 500
CPU_DUCK_DURATION_MS = 400

HIT_FLASH_MS = 300
HIT_COOLDOWN_MS = 500
HANDOFF_DELAY_MS = 2000

# Timer periods
HOLD_TICK_MS = 50
CPU_MOVE_TICK_MS = 200
CPU_REACTION_BASE_MS = 500
CPU_REACTION_STEP_MS = 100   # shaved off per difficulty point above 1.0
CPU_REACTION_MIN_MS = 200

# =============================================================================
# CPU POLICY
# =============================================================================

CPU_ATTACK_RANGE = 170
CPU_ATTACK_CHANCE = 0.6
CPU_PUNCH_THRESHOLD = 0.3    # roll < 0.3 -> punch
CPU_KICK_THRESHOLD = 0.5     # roll < 0.5 -> kick, else defence up to 0.6
CPU_MAX_IDLE_TICKS = 3
CPU_MOVE_CHANCE = 0.5
CPU_EVADE_CHANCE = 0.1

CPU_DUCK_VS_KICK_CHANCE = 0.7
CPU_JUMP_VS_PUNCH_CHANCE = 0.7
CPU_DEFENCE_CHANCE = 0.4

# =============================================================================
# ROUND SETTINGS
# =============================================================================

DEFAULT_DIFFICULTY = 1.0
DIFFICULTY_STEP = 0.2
MAX_DIFFICULTY = 3.0

# =============================================================================
# ENUMS
# =============================================================================

class GameState(Enum):
    """Screens of the pygame shell"""
    FIGHTING = auto()
    PAUSED = auto()
    MATCH_END = auto()


class MatchPhase(Enum):
    """Phases of one simulated match"""
    ACTIVE = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class Side(Enum):
    """Which combatant; also fixes the home edge"""
    PLAYER = "player"
    CPU = "cpu"


class FighterState(Enum):
    """Combatant states, mutually exclusive"""
    IDLE = "idle"
    JUMP = "jump"
    DUCK = "duck"
    PUNCH = "punch"
    KICK = "kick"
    JUMP_KICK = "jumpKick"
    DEFENCE = "defence"


class JumpDirection(Enum):
    LEFT = "left"
    RIGHT = "right"
    NONE = "none"


class AttackKind(Enum):
    PUNCH = "punch"
    KICK = "kick"
    JUMP_KICK = "jumpKick"


class HitResult(Enum):
    NONE = "none"
    BLOCKED = "blocked"
    LANDED = "landed"


AIRBORNE_STATES = frozenset({FighterState.JUMP, FighterState.JUMP_KICK})

# Auto-revert durations; None = held (player duck) or enclosing jump
STATE_DURATIONS_MS: Dict[FighterState, int] = {
    FighterState.PUNCH: PUNCH_DURATION_MS,
    FighterState.KICK: KICK_DURATION_MS,
    FighterState.DEFENCE: DEFENCE_DURATION_MS,
    FighterState.JUMP: JUMP_DURATION_MS,
}

# =============================================================================
# ATTACK DEFINITIONS
# =============================================================================

@dataclass(frozen=True)
class AttackData:
    """Data for each attack kind"""
    name: str
    state: FighterState
    base_damage: int
    reach: int
    hits_ducking: bool
    cpu_cooldown_ms: int = 0   # extra lockout after the action reverts


ATTACK_DATA: Dict[AttackKind, AttackData] = {
    AttackKind.PUNCH: AttackData(
        name="Punch",
        state=FighterState.PUNCH,
        base_damage=5,
        reach=140,
        hits_ducking=True,
        cpu_cooldown_ms=300,
    ),
    AttackKind.KICK: AttackData(
        name="Kick",
        state=FighterState.KICK,
        base_damage=10,
        reach=170,
        hits_ducking=False,
        cpu_cooldown_ms=400,
    ),
    AttackKind.JUMP_KICK: AttackData(
        name="Jump Kick",
        state=FighterState.JUMP_KICK,
        base_damage=15,
        reach=170,
        hits_ducking=True,
    ),
}

ATTACK_BY_STATE: Dict[FighterState, AttackKind] = {
    data.state: kind for kind, data in ATTACK_DATA.items()
}

DEFENCE_CHIP_DAMAGE = 1
CPU_DEFENCE_COOLDOWN_MS = 500

# =============================================================================
# AUDIO SETTINGS
# =============================================================================

AUDIO_ENABLED = True
AUDIO_SAMPLE_RATE = 44100
AUDIO_CHANNELS = 2
AUDIO_BUFFER_SIZE = 512

MASTER_VOLUME = 0.8
SFX_VOLUME = 0.7

# =============================================================================
# DEBUG FLAGS
# =============================================================================

DEBUG_HITBOXES = False
DEBUG_HITS = False
DEBUG_AI_DECISIONS = False
DEBUG_FRAMERATE = True
