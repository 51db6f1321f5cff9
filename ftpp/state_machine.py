"""A finite state machine with per-state actions and transition callbacks."""

from __future__ import annotations

from typing import Callable, Generic, Hashable, Optional, TypeVar

S = TypeVar("S", bound=Hashable)


class StateMachine(Generic[S]):
    """States with actions; only explicitly added transitions may be taken."""

    def __init__(self) -> None:
        self._actions: dict[S, Optional[Callable[[], None]]] = {}
        self._transitions: dict[tuple[S, S], Callable[[], None]] = {}
        self._current: Optional[S] = None
        self._has_current = False

    @property
    def current_state(self) -> Optional[S]:
        return self._current

    def add_state(self, state: S) -> None:
        """Register ``state`` with no action; the first state becomes current."""
        self._actions[state] = None
        if not self._has_current:
            self._current = state
            self._has_current = True

    def add_action(self, state: S, action: Callable[[], None]) -> None:
        if state not in self._actions:
            raise ValueError("State not found")
        self._actions[state] = action

    def add_transition(
        self, start_state: S, final_state: S, action: Callable[[], None]
    ) -> None:
        if start_state not in self._actions or final_state not in self._actions:
            raise ValueError("State not found")
        self._transitions[(start_state, final_state)] = action

    def transition_to(self, state: S) -> None:
        """Run the transition callback from the current state and switch to ``state``."""
        if state not in self._actions:
            raise ValueError("State not found")
        if self._has_current:
            try:
                callback = self._transitions[(self._current, state)]
            except KeyError:
                raise ValueError("Transition not defined") from None
            callback()
        self._current = state
        self._has_current = True

    def update(self) -> None:
        """Run the action of the current state, if it has one."""
        if not self._has_current:
            raise RuntimeError("No state has been set")
        action = self._actions[self._current]
        if action is not None:
            action()