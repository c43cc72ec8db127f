"""
Ticket summarizer — stub standing in for an LLM summary call.

It builds the prompt a real model would receive, waits for a simulated round
trip, and returns a placeholder summary assembled from the tickets.
"""

import asyncio

from structlog import get_logger

from ticket_search.core.config import settings
from ticket_search.llm.prompts import build_summary_prompt
from ticket_search.models.tickets import Ticket

logger = get_logger()

NO_TICKETS_FOUND = (
    "No relevant tickets were found in the database. Please try a different query."
)


def compose_placeholder_summary(query: str, tickets: list[Ticket]) -> str:
    """Assemble the placeholder summary text for ``tickets``."""
    summary = f'Based on your search for "{query}", I found the following relevant tickets:\n\n'

    if not tickets:
        return summary + NO_TICKETS_FOUND

    preview_chars = settings.SUMMARY_PREVIEW_CHARS
    for ticket in tickets:
        summary += (
            f"- **{ticket.title}** ({ticket.id}): "
            f"{ticket.description[:preview_chars]}...\n"
        )
    summary += (
        f"\nTo get a detailed summary of these tickets, you would send this "
        f"information to an AI model like {settings.SUMMARY_MODEL_NAME} with a "
        f'prompt like: "Summarize the key information from these tickets and '
        f"answer the user's question: '{query}'\".\n"
    )
    return summary


async def summarize_tickets(
    query: str,
    tickets: list[Ticket],
    *,
    delay: float,
) -> str:
    """Summarize ``tickets`` in light of ``query``.

    **This is a stub.** No model is called.

    Args:
        query: The query the tickets were retrieved for.
        tickets: Retrieved tickets, in display order.
        delay: Simulated round-trip time in seconds.

    Returns:
        The summary text.
    """
    messages = build_summary_prompt(query, tickets)
    logger.info(
        "summary_stub_start",
        model=settings.SUMMARY_MODEL_NAME,
        messages_count=len(messages),
        prompt_chars=sum(len(m["content"]) for m in messages),
        tickets=len(tickets),
    )

    await asyncio.sleep(delay)

    summary = compose_placeholder_summary(query, tickets)
    logger.info("summary_stub_complete", summary_len=len(summary))
    return summary
