"""
Core engine modules

Only the leaf modules are re-exported here; Match, RoundController, Game
and InputHandler are imported from their own modules.
"""

from .state_machine import StateMachine
from .scheduler import Scheduler, TimerHandle, PeriodicTask
from .keys import KeyState, EdgeDetector

__all__ = [
    'StateMachine', 'Scheduler', 'TimerHandle', 'PeriodicTask',
    'KeyState', 'EdgeDetector'
]
