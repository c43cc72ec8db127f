"""
Context retriever — stub for fetching tickets relevant to a query.

Replace this with a real vector search (e.g. an embeddings index over the
ticket collection) when one is available. Until then it waits for a simulated
round trip and does a plain substring match.
"""

import asyncio

from structlog import get_logger

from ticket_search.context.catalog import get_ticket_catalog
from ticket_search.models.tickets import Ticket

logger = get_logger()


def match_tickets(query: str, tickets: list[Ticket]) -> list[Ticket]:
    """Return the tickets whose title or description contains ``query``.

    Matching is a case-insensitive substring test; keywords are not
    searched. Catalog order is preserved.
    """
    needle = query.lower()
    return [
        t
        for t in tickets
        if needle in t.title.lower() or needle in t.description.lower()
    ]


async def fetch_relevant_tickets(query: str, *, delay: float) -> list[Ticket]:
    """Retrieve the tickets relevant to a free-text query.

    **This is a stub.** It sleeps for ``delay`` seconds in place of a network
    call, then filters the local catalog with :func:`match_tickets`.

    Args:
        query: Free-text query from the session.
        delay: Simulated round-trip time in seconds.

    Returns:
        Matching tickets in catalog order (possibly empty).
    """
    await asyncio.sleep(delay)

    matched = match_tickets(query, get_ticket_catalog())
    logger.debug(
        "relevant_tickets_stub",
        query_len=len(query),
        matched=[t.id for t in matched],
    )
    return matched
