"""
Input handling for keyboard
"""

import pygame
from typing import Dict, Set, Tuple
from dataclasses import dataclass, field

from arcade_brawl.core.keys import KeyState


@dataclass
class InputState:
    """Current state of all inputs"""
    keys_pressed: Set[int] = field(default_factory=set)
    keys_just_pressed: Set[int] = field(default_factory=set)

    # Special
    quit_requested: bool = False


class InputHandler:
    """
    Centralized input handling.
    Tracks raw pygame keys and maps them onto the engine's KeyState.
    """

    def __init__(self):
        self.state = InputState()
        self._prev_keys: Set[int] = set()

        # Fighter keys (KeyState field -> pygame keys)
        self.fighter_bindings: Dict[str, Tuple[int, ...]] = {
            'left': (pygame.K_LEFT,),
            'right': (pygame.K_RIGHT,),
            'up': (pygame.K_UP,),
            'down': (pygame.K_DOWN,),
            'punch': (pygame.K_d,),
            'kick': (pygame.K_a,),
            'defence': (pygame.K_s,),
        }

        # Shell actions (action -> pygame keys)
        self.bindings: Dict[str, Tuple[int, ...]] = {
            'pause': (pygame.K_ESCAPE, pygame.K_p),
            'mute': (pygame.K_m,),
            'quit': (pygame.K_q,),
            'debug': (pygame.K_F1,),
        }

    def update(self):
        """
        Update input state. Call once per frame before processing events.
        """
        self._prev_keys = self.state.keys_pressed.copy()
        self.state.keys_just_pressed.clear()
        self.state.quit_requested = False

    def process_event(self, event: pygame.event.Event):
        """Process a single pygame event"""
        if event.type == pygame.QUIT:
            self.state.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            self.state.keys_pressed.add(event.key)
            if event.key not in self._prev_keys:
                self.state.keys_just_pressed.add(event.key)

        elif event.type == pygame.KEYUP:
            self.state.keys_pressed.discard(event.key)

        elif event.type == pygame.WINDOWFOCUSLOST:
            # Key-up events are lost while unfocused
            self.state.keys_pressed.clear()

    def key_state(self) -> KeyState:
        """
        Snapshot of the fighter keys for the engine.
        A key pressed and released inside one frame still counts as held.
        """
        down = self.state.keys_pressed | self.state.keys_just_pressed
        return KeyState(**{
            name: any(key in down for key in keys)
            for name, keys in self.fighter_bindings.items()
        })

    def is_key_just_pressed(self, key: int) -> bool:
        """Check if key was just pressed this frame"""
        return key in self.state.keys_just_pressed

    def is_action_just_pressed(self, action: str) -> bool:
        """Check if bound action key was just pressed"""
        return any(self.is_key_just_pressed(k) for k in self.bindings.get(action, ()))

    def should_quit(self) -> bool:
        """Check if quit was requested"""
        return self.state.quit_requested or self.is_action_just_pressed('quit')
