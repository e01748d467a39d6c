"""State machine for one interactive review session.

The session is a single immutable SessionState value and a pure ``reduce``
function. Key presses, terminal resizes, timer ticks and the one completion
message from the review fetch are all events delivered in order through the
same function, so there is never more than one transition in flight and the
fetch never touches the state directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union

from revyu_core.models import ReviewItem
from revyu_core.parser import parse_review_items

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 120
DEFAULT_HEIGHT = 40


class Phase(Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class SessionState:
    target: str = "."
    loading: bool = True
    error: Optional[str] = None
    review: str = ""
    items: tuple[ReviewItem, ...] = field(default_factory=tuple)
    cursor: int = 0
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    quitting: bool = False
    frame: int = 0  # loading animation frame

    @property
    def phase(self) -> Phase:
        if self.loading:
            return Phase.LOADING
        if self.error is not None:
            return Phase.FAILED
        return Phase.READY


# ---------------------------------------------------------------------- #
# Events                                                                  #
# ---------------------------------------------------------------------- #


@dataclass(frozen=True)
class ReviewFetched:
    """The single completion message of the review fetch."""

    review: str = ""
    error: Optional[str] = None


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class NavigateUp:
    pass


@dataclass(frozen=True)
class NavigateDown:
    pass


@dataclass(frozen=True)
class ToggleCurrent:
    pass


@dataclass(frozen=True)
class CheckAll:
    pass


@dataclass(frozen=True)
class UncheckAll:
    pass


@dataclass(frozen=True)
class Confirm:
    pass


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Tick:
    pass


Event = Union[ReviewFetched, Quit, NavigateUp, NavigateDown, ToggleCurrent, CheckAll, UncheckAll, Confirm, Resize, Tick]

KEYMAP: dict[str, Event] = {
    "up": NavigateUp(),
    "k": NavigateUp(),
    "down": NavigateDown(),
    "j": NavigateDown(),
    "space": ToggleCurrent(),
    "x": ToggleCurrent(),
    "a": CheckAll(),
    "n": UncheckAll(),
    "enter": Confirm(),
    "q": Quit(),
    "ctrl+c": Quit(),
}


def event_for_key(key: str) -> Optional[Event]:
    """Map a terminal key name to a session event, or None for unbound keys."""
    return KEYMAP.get(key)


def initial_state(target: str = ".", width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> SessionState:
    return SessionState(target=target, width=width, height=height)


def checked_count(state: SessionState) -> int:
    return sum(1 for item in state.items if item.checked)


# ---------------------------------------------------------------------- #
# Reducer                                                                 #
# ---------------------------------------------------------------------- #


def _with_checked(items: tuple[ReviewItem, ...], checked: bool) -> tuple[ReviewItem, ...]:
    return tuple(replace(item, checked=checked) for item in items)


def _reduce_ready(state: SessionState, event: Event) -> SessionState:
    if isinstance(event, NavigateUp):
        return replace(state, cursor=max(state.cursor - 1, 0))

    if isinstance(event, NavigateDown):
        if state.cursor < len(state.items) - 1:
            return replace(state, cursor=state.cursor + 1)
        return state

    if isinstance(event, ToggleCurrent):
        if not state.items or not 0 <= state.cursor < len(state.items):
            return state
        items = list(state.items)
        current = items[state.cursor]
        items[state.cursor] = replace(current, checked=not current.checked)
        return replace(state, items=tuple(items))

    if isinstance(event, CheckAll):
        return replace(state, items=_with_checked(state.items, True))

    if isinstance(event, UncheckAll):
        return replace(state, items=_with_checked(state.items, False))

    if isinstance(event, Confirm):
        return replace(state, quitting=True)

    return state


def reduce(state: SessionState, event: Event) -> SessionState:
    """Return the state that follows ``state`` after ``event``.

    Never mutates ``state``. Events that do not apply in the current phase
    leave the state unchanged.
    """
    if isinstance(event, Quit):
        return replace(state, quitting=True)

    if isinstance(event, Resize):
        return replace(state, width=event.width, height=event.height)

    phase = state.phase

    if phase is Phase.LOADING:
        if isinstance(event, ReviewFetched):
            if event.error is not None:
                logger.debug("Review fetch failed: %s", event.error)
                return replace(state, loading=False, error=event.error, review=event.review)
            items = tuple(parse_review_items(event.review))
            if not items:
                logger.warning("No review items extracted; falling back to plain rendering.")
            return replace(state, loading=False, error=None, review=event.review, items=items, cursor=0)
        if isinstance(event, Tick):
            return replace(state, frame=state.frame + 1)
        return state

    if phase is Phase.READY:
        return _reduce_ready(state, event)

    return state
