"""
Logical key state and edge detection
====================================
Engine-side view of the keyboard. The pygame InputHandler fills a KeyState;
the engine never sees raw key codes.
"""

from dataclasses import dataclass, fields
from typing import FrozenSet


@dataclass(frozen=True)
class KeyState:
    """Which logical keys are held right now"""
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    punch: bool = False
    kick: bool = False
    defence: bool = False

    def held(self) -> FrozenSet[str]:
        """Names of all held keys"""
        return frozenset(f.name for f in fields(self) if getattr(self, f.name))

    @property
    def any_direction(self) -> bool:
        return self.left or self.right


class EdgeDetector:
    """
    Derives pressed/released edges by comparing each KeyState with the
    previous one. The input source is never mutated.
    """

    def __init__(self):
        self.previous = KeyState()
        self.current = KeyState()

    def update(self, key_state: KeyState):
        self.previous = self.current
        self.current = key_state

    def pressed(self, key: str) -> bool:
        """True only on the update where key went from up to down"""
        return getattr(self.current, key) and not getattr(self.previous, key)

    def released(self, key: str) -> bool:
        return getattr(self.previous, key) and not getattr(self.current, key)

    def is_held(self, key: str) -> bool:
        return getattr(self.current, key)
