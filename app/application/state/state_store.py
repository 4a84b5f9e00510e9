"""Subscribable holder of the current dealership state."""

from collections.abc import Callable
from typing import Optional

from app.application.dtos.dealership_state import DealershipState

StateListener = Callable[[DealershipState], None]


class StateStore:
    """Holds one immutable DealershipState and notifies listeners on every swap.

    Snapshots are never mutated: `set` replaces the whole reference in a single
    assignment, so a listener always receives a consistent view.
    """

    def __init__(self, initial: Optional[DealershipState] = None) -> None:
        self._value = initial if initial is not None else DealershipState()
        self._listeners: list[StateListener] = []

    @property
    def value(self) -> DealershipState:
        """Current snapshot."""
        return self._value

    def set(self, state: DealershipState) -> None:
        """Replace the snapshot and notify listeners."""
        self._value = state
        for listener in list(self._listeners):
            listener(state)

    def update(self, **changes) -> DealershipState:
        """
        Replace the snapshot with a copy carrying the given field changes.

        Args:
            **changes: DealershipState fields to replace

        Returns:
            The new snapshot
        """
        state = self._value.model_copy(update=changes)
        self.set(state)
        return state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a listener called with each new snapshot.

        Args:
            listener: Callback receiving the new DealershipState

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
