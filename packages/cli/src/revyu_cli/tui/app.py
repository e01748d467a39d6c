"""Textual front end for the review session.

The app owns a SessionState and nothing else. Every input (key press, resize,
animation tick, fetch completion) is turned into a session event and passed to
``reduce``; the single Static widget is then redrawn from the new state.

The review fetch runs on a daemon thread and reports back with exactly one
ReviewFetched message. Quitting does not wait for it: the thread is simply
abandoned when the process exits.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.message import Message
from textual.widgets import Static

from revyu_core.session import (
    Event,
    Phase,
    Quit,
    ReviewFetched,
    Resize,
    SessionState,
    Tick,
    event_for_key,
    initial_state,
    reduce,
)
from revyu_core.view import render_session

logger = logging.getLogger(__name__)

TICK_INTERVAL = 0.1


class FetchCompleted(Message):
    """Posted from the fetch thread once the review is available (or failed)."""

    def __init__(self, result: ReviewFetched) -> None:
        super().__init__()
        self.result = result


class ReviewApp(App[SessionState]):
    # ctrl+c is bound with priority so it reaches the session instead of the
    # built-in quit handling.
    BINDINGS = [Binding("ctrl+c", "quit_session", show=False, priority=True)]

    CSS = """
    Screen {
        background: $background;
    }
    #frame {
        width: auto;
        height: auto;
    }
    """

    def __init__(self, fetch: Callable[[], str], target: str = ".", width: int = 120, height: int = 40):
        super().__init__()
        self._fetch = fetch
        self.session_state = initial_state(target=target, width=width, height=height)
        self._ticker = None

    def compose(self) -> ComposeResult:
        yield Static(render_session(self.session_state), id="frame")

    def on_mount(self) -> None:
        self._ticker = self.set_interval(TICK_INTERVAL, self._on_tick)
        threading.Thread(target=self._run_fetch, name="revyu-fetch", daemon=True).start()

    def _run_fetch(self) -> None:
        """Runs on the fetch thread; communicates only by posting a message."""
        try:
            result = ReviewFetched(review=self._fetch())
        except Exception as e:
            logger.debug("Review fetch raised", exc_info=True)
            result = ReviewFetched(error=str(e) or e.__class__.__name__)
        self.post_message(FetchCompleted(result))

    # ------------------------------------------------------------------ #
    # Event sources                                                        #
    # ------------------------------------------------------------------ #

    def _on_tick(self) -> None:
        self.apply_event(Tick())

    def on_fetch_completed(self, message: FetchCompleted) -> None:
        self.apply_event(message.result)

    def on_resize(self, event: events.Resize) -> None:
        self.apply_event(Resize(width=event.size.width, height=event.size.height))

    def action_quit_session(self) -> None:
        self.apply_event(Quit())

    def on_key(self, event: events.Key) -> None:
        session_event = event_for_key(event.key)
        if session_event is None:
            return
        event.prevent_default()
        event.stop()
        self.apply_event(session_event)

    # ------------------------------------------------------------------ #
    # Reducer loop                                                         #
    # ------------------------------------------------------------------ #

    def apply_event(self, event: Event) -> None:
        previous = self.session_state
        self.session_state = reduce(previous, event)

        if self.session_state.quitting:
            self.exit(self.session_state)
            return

        if self.session_state.phase is not Phase.LOADING and self._ticker is not None:
            self._ticker.stop()
            self._ticker = None

        if self.session_state is previous:
            return
        try:
            frame = self.query_one("#frame", Static)
        except NoMatches:
            # Not composed yet; compose() renders the current state.
            return
        frame.update(render_session(self.session_state))
