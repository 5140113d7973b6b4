"""Fetch controller: drives Loading -> Success | Error cycles for forecasts."""

import asyncio
import logging
from typing import Protocol

from weatherapp.config import loader
from weatherapp.config.defaults import DEFAULT_DAYS, DEFAULT_ERROR_MESSAGE, DEFAULT_LOCATION
from weatherapp.config.schema import AppConfig
from weatherapp.controller.publisher import Observer, StatePublisher, Subscription
from weatherapp.models.forecast import ForecastResult, Query
from weatherapp.models.state import FetchState

logger = logging.getLogger(__name__)


class ForecastSource(Protocol):
    async def fetch(self, query: Query) -> ForecastResult: ...


class FetchController:
    """Owns the FetchState cell and runs one fetch cycle per refresh.

    Every refresh publishes Loading before returning, then resolves to exactly
    one Success or Error. A newer refresh supersedes any cycle still in flight:
    the old task is cancelled and anything it still produces is discarded.

    Must be created inside a running event loop when autostart is enabled,
    since construction performs the initial refresh.
    """

    def __init__(
        self,
        source: ForecastSource,
        default_query: Query | None = None,
        *,
        error_fallback: str = DEFAULT_ERROR_MESSAGE,
        autostart: bool = True,
    ):
        self._source = source
        self.default_query = default_query or Query(DEFAULT_LOCATION, DEFAULT_DAYS)
        self.error_fallback = error_fallback
        self._publisher: StatePublisher[FetchState] = StatePublisher(FetchState.loading())
        self._generation = 0
        self._task: asyncio.Task[FetchState] | None = None

        if autostart:
            self.refresh()

    @classmethod
    def from_config(
        cls, source: ForecastSource, config: AppConfig, autostart: bool = True
    ) -> "FetchController":
        return cls(
            source,
            loader.default_query(config),
            error_fallback=config.forecast.error_fallback,
            autostart=autostart,
        )

    # --- Observation ---

    def current_state(self) -> FetchState:
        return self._publisher.value

    def subscribe(self, observer: Observer) -> Subscription:
        return self._publisher.subscribe(observer)

    # --- Cycles ---

    def refresh(self, query: Query | None = None) -> "asyncio.Task[FetchState]":
        """Start a new fetch cycle and return its task.

        Loading is published synchronously. The task resolves to the state the
        cycle published. A superseded task is cancelled; if its source ignores
        the cancellation, the task resolves to the current state instead and
        publishes nothing. When called by an observer while a cycle delivers
        its terminal state, that cycle is left to finish with its own state.
        """
        query = query or self.default_query
        loop = asyncio.get_running_loop()

        self._generation += 1
        generation = self._generation
        previous = self._task
        if (
            previous is not None
            and not previous.done()
            and previous is not asyncio.current_task()
        ):
            logger.debug("Cancelling superseded cycle %d", generation - 1)
            previous.cancel()

        logger.info("Fetch cycle %d: q=%s days=%d", generation, query.location, query.days)
        self._publisher.publish(FetchState.loading())
        self._task = loop.create_task(self._run_cycle(generation, query))
        return self._task

    async def wait(self) -> FetchState:
        """Wait until no cycle is in flight and return the current state.

        If the caller cancelled the latest cycle's task, nothing terminal was
        published and this returns Loading until the next refresh.
        """
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
        return self.current_state()

    async def _run_cycle(self, generation: int, query: Query) -> FetchState:
        try:
            result = await self._source.fetch(query)
        except asyncio.CancelledError:
            logger.debug("Fetch cycle %d cancelled", generation)
            raise
        except Exception as e:
            state = FetchState.error(str(e) or self.error_fallback)
            logger.warning("Fetch cycle %d failed: %s", generation, state.message)
        else:
            state = FetchState.success(result)
            logger.info(
                "Fetch cycle %d succeeded: %s, %d day(s)",
                generation, result.location.name, len(result.forecast),
            )

        if generation != self._generation:
            logger.debug("Discarding stale result of cycle %d", generation)
            return self.current_state()
        self._publisher.publish(state)
        return state

    # --- Lifecycle ---

    async def aclose(self) -> None:
        """Cancel any in-flight cycle and close the source if it supports it."""
        self._generation += 1
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.wait({task})
        close = getattr(self._source, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "FetchController":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
