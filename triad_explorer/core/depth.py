from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ExplorerEvent(str, Enum):
    MOUNT = "mount"
    RESIZE = "resize"
    INCREASE = "increase"
    DECREASE = "decrease"


@dataclass(frozen=True)
class ViewState:
    current_depth: int = 0


@dataclass(frozen=True)
class Transition:
    state: ViewState
    repaint: bool
    reset_viewport: bool
    changed: bool


def transition(state: ViewState, event: ExplorerEvent, bounds: Tuple[int, int] = (0, 6)) -> Transition:
    """(state, event) -> (new state, repaint / viewport work to do)."""
    min_depth, max_depth = bounds
    depth = state.current_depth
    if event is ExplorerEvent.INCREASE:
        new_depth = min(depth + 1, max_depth)
    elif event is ExplorerEvent.DECREASE:
        new_depth = max(depth - 1, min_depth)
    elif event in (ExplorerEvent.MOUNT, ExplorerEvent.RESIZE):
        return Transition(state, repaint=True, reset_viewport=True, changed=False)
    else:
        raise ValueError(f"Unknown explorer event: {event!r}")
    # Clamped requests still repaint; redrawing the same depth is harmless.
    new_state = state if new_depth == depth else ViewState(new_depth)
    return Transition(new_state, repaint=True, reset_viewport=False, changed=new_depth != depth)


class DepthController:
    def __init__(self, min_depth: int = 0, max_depth: int = 6, initial_depth: int = 0) -> None:
        self.min_depth = min_depth
        self.max_depth = max_depth
        self._state = ViewState(min(max(initial_depth, min_depth), max_depth))

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def current_depth(self) -> int:
        return self._state.current_depth

    @property
    def bounds(self) -> Tuple[int, int]:
        return self.min_depth, self.max_depth

    def can_increase(self) -> bool:
        return self.current_depth < self.max_depth

    def can_decrease(self) -> bool:
        return self.current_depth > self.min_depth

    def apply(self, event: ExplorerEvent) -> Transition:
        result = transition(self._state, event, self.bounds)
        self._state = result.state
        return result

    def increase(self) -> int:
        return self.apply(ExplorerEvent.INCREASE).state.current_depth

    def decrease(self) -> int:
        return self.apply(ExplorerEvent.DECREASE).state.current_depth
