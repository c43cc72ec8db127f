"""
Session service — runs the search and summarize actions for one session and
applies their results to the session state.

Each action bumps a generation counter before awaiting its stub. When the
stub settles, the result is applied only if no newer invocation has started
since; otherwise it is dropped. A new search also supersedes any pending
summary.
"""

import asyncio
from collections.abc import Coroutine

from structlog import get_logger

from ticket_search.context.retriever import fetch_relevant_tickets
from ticket_search.core.config import settings
from ticket_search.llm.summarizer import summarize_tickets
from ticket_search.models.session import (
    Idle,
    SearchFailed,
    Searched,
    Searching,
    SessionState,
    Summarized,
    SummaryFailed,
    Summarizing,
)

logger = get_logger()

NOTHING_TO_SUMMARIZE = (
    "No tickets were retrieved to summarize. Please perform a search first."
)


class TicketSession:
    """View state of one search/summarize session."""

    def __init__(
        self,
        session_id: str,
        query: str = "",
        search_delay: float | None = None,
        summary_delay: float | None = None,
    ) -> None:
        self.session_id = session_id
        self.query = query
        self.state: SessionState = Idle()
        # Shown in the summary panel when nothing is held yet
        self.notice = ""
        self._search_delay = search_delay
        self._summary_delay = summary_delay
        self._search_generation = 0
        self._summary_generation = 0
        self._tasks: set[asyncio.Task] = set()

    @property
    def search_delay(self) -> float:
        if self._search_delay is None:
            return settings.SEARCH_DELAY_SECONDS
        return self._search_delay

    @property
    def summary_delay(self) -> float:
        if self._summary_delay is None:
            return settings.SUMMARY_DELAY_SECONDS
        return self._summary_delay

    @property
    def pending_tasks(self) -> int:
        return len(self._tasks)

    # ── Actions ─────────────────────────────────────────

    async def search(self) -> None:
        """Replace the held results with the tickets matching ``query``.

        Failures are logged and turned into the ``search_failed`` phase;
        they are never re-raised.
        """
        await _settled(self.start_search())

    async def summarize(self) -> None:
        """Summarize the held results.

        With no results held, ``notice`` is set straight away, the phase is
        left as it is and no summarizer call is made.
        """
        task = self.start_summarize()
        if task is not None:
            await _settled(task)

    def start_search(self) -> asyncio.Task:
        """Enter the searching phase now and finish the search in the background."""
        return self._spawn(self._run_search(*self._begin_search()))

    def start_summarize(self) -> asyncio.Task | None:
        """Like :meth:`start_search`; returns None when there was nothing to summarize."""
        pending = self._begin_summary()
        if pending is None:
            return None
        return self._spawn(self._run_summary(*pending))

    async def aclose(self) -> None:
        """Cancel in-flight actions so nothing lands on a discarded session."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.info(
                "session_tasks_cancelled",
                session=self.session_id,
                cancelled=len(tasks),
            )

    # ── Search ──────────────────────────────────────────

    def _begin_search(self) -> tuple[int, str]:
        self._search_generation += 1
        self._summary_generation += 1
        self.notice = ""
        self.state = Searching(query=self.query)
        logger.info(
            "search_start",
            session=self.session_id,
            generation=self._search_generation,
            query_len=len(self.query),
        )
        return self._search_generation, self.query

    async def _run_search(self, generation: int, query: str) -> None:
        try:
            tickets = await fetch_relevant_tickets(query, delay=self.search_delay)
        except Exception:
            if self._is_stale_search(generation):
                return
            logger.exception(
                "search_failed",
                session=self.session_id,
                generation=generation,
            )
            self.state = SearchFailed(query=query)
            return

        if self._is_stale_search(generation):
            return

        self.state = Searched(query=query, tickets=tickets)
        logger.info(
            "search_complete",
            session=self.session_id,
            generation=generation,
            matched=len(tickets),
        )

    def _is_stale_search(self, generation: int) -> bool:
        if generation == self._search_generation:
            return False
        logger.info(
            "search_result_discarded",
            session=self.session_id,
            generation=generation,
            current=self._search_generation,
        )
        return True

    # ── Summary ─────────────────────────────────────────

    def _begin_summary(self) -> tuple[int, Summarizing] | None:
        tickets = self.state.held_tickets
        if not tickets:
            self.notice = NOTHING_TO_SUMMARIZE
            logger.info(
                "summarize_skipped", session=self.session_id, phase=self.state.phase
            )
            return None

        self._summary_generation += 1
        self.notice = ""

        # Restate the query the results were retrieved for.
        self.state = Summarizing(query=self.state.query, tickets=tickets)
        logger.info(
            "summarize_start",
            session=self.session_id,
            generation=self._summary_generation,
            tickets=len(tickets),
        )
        return self._summary_generation, self.state

    async def _run_summary(self, generation: int, pending: Summarizing) -> None:
        query, tickets = pending.query, pending.tickets

        try:
            summary = await summarize_tickets(query, tickets, delay=self.summary_delay)
        except Exception:
            if self._is_stale_summary(generation):
                return
            logger.exception(
                "summarize_failed",
                session=self.session_id,
                generation=generation,
            )
            self.state = SummaryFailed(query=query, tickets=tickets)
            return

        if self._is_stale_summary(generation):
            return

        self.state = Summarized(query=query, tickets=tickets, summary=summary)
        logger.info(
            "summarize_complete",
            session=self.session_id,
            generation=generation,
            summary_len=len(summary),
        )

    def _is_stale_summary(self, generation: int) -> bool:
        if generation == self._summary_generation:
            return False
        logger.info(
            "summary_result_discarded",
            session=self.session_id,
            generation=generation,
            current=self._summary_generation,
        )
        return True

    # ── Internal helpers ────────────────────────────────

    def _spawn(self, coro: Coroutine) -> asyncio.Task:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task


async def _settled(task: asyncio.Task) -> None:
    """Wait for ``task`` without taking its cancellation as our own."""
    await asyncio.wait([task])
