"""
State Machine for match and game flow management
"""

from enum import Enum
from typing import Dict, Optional, Callable, Iterable, FrozenSet


class StateMachine:
    """
    Manages enum states and transitions with enter/exit/update handlers.
    Final states are irrevocable: once entered, transitions are ignored.
    """

    def __init__(self, initial_state: Enum, final_states: Iterable[Enum] = ()):
        self.current_state: Enum = initial_state
        self.final_states: FrozenSet[Enum] = frozenset(final_states)

        # State handlers
        self._enter_handlers: Dict[Enum, Callable] = {}
        self._exit_handlers: Dict[Enum, Callable] = {}
        self._update_handlers: Dict[Enum, Callable] = {}

    def register_handlers(
        self,
        state: Enum,
        enter: Optional[Callable] = None,
        exit_handler: Optional[Callable] = None,
        update: Optional[Callable] = None
    ):
        """Register handlers for a state"""
        if enter:
            self._enter_handlers[state] = enter
        if exit_handler:
            self._exit_handlers[state] = exit_handler
        if update:
            self._update_handlers[state] = update

    def transition_to(self, new_state: Enum) -> bool:
        """
        Transition to a new state.
        Calls exit handler on current state, then enter handler on new state.
        Returns False when the transition was ignored.
        """
        if self.is_final:
            return False

        if new_state == self.current_state:
            return False

        # Exit current state
        if self.current_state in self._exit_handlers:
            self._exit_handlers[self.current_state]()

        self.current_state = new_state

        # Enter new state
        if new_state in self._enter_handlers:
            self._enter_handlers[new_state]()

        return True

    def update(self, dt: float):
        """Update current state"""
        if self.current_state in self._update_handlers:
            self._update_handlers[self.current_state](dt)

    def is_state(self, state: Enum) -> bool:
        """Check if current state matches"""
        return self.current_state == state

    @property
    def is_final(self) -> bool:
        return self.current_state in self.final_states
