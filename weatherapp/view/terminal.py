"""Terminal view: renders every published fetch state to a text stream."""

import asyncio
import logging
import sys
from typing import TextIO

from weatherapp.controller.fetch_controller import FetchController
from weatherapp.controller.publisher import Subscription
from weatherapp.models.state import FetchState, StateKind
from weatherapp.view.formatters import format_state

logger = logging.getLogger(__name__)


class TerminalView:
    def __init__(
        self,
        controller: FetchController,
        stream: TextIO | None = None,
        as_json: bool = False,
        show_loading: bool = True,
    ):
        self.controller = controller
        self.stream = stream or sys.stdout
        self.as_json = as_json
        self.show_loading = show_loading
        self._subscription: Subscription | None = None

    def attach(self) -> None:
        """Subscribe and render the controller's current state immediately."""
        if self._subscription is not None:
            return
        self._subscription = self.controller.subscribe(self.render)
        self.render(self.controller.current_state())

    def detach(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def render(self, state: FetchState) -> None:
        if state.kind == StateKind.LOADING and not self.show_loading:
            return
        self.stream.write(format_state(state, as_json=self.as_json) + "\n")
        self.stream.flush()

    def retry(self) -> "asyncio.Task[FetchState]":
        logger.info("Retry requested")
        return self.controller.refresh()
