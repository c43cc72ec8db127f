"""
LLM prompt templates for summarizing retrieved tickets.
"""

import json

from ticket_search.models.tickets import Ticket

# ── System prompt ──────────────────────────────────────

SYSTEM_SUMMARY = """\
You are a support analyst AI assistant. You are given a user's question and \
a set of tickets retrieved from the ticket database.

## Your task
1. Summarize the key information from the retrieved tickets.
2. Answer the user's question using only that information.

## Rules
- Reference tickets by their id (e.g. TKT-101).
- If the tickets do not answer the question, say so plainly.
- Write in clear, professional language.
"""


# ── Prompt builders ────────────────────────────────────


def build_summary_prompt(query: str, tickets: list[Ticket]) -> list[dict]:
    """Build the messages array for the summary LLM call."""
    retrieved = json.dumps([t.model_dump() for t in tickets], indent=2)

    user_content = (
        f"The user's query is: '{query}'. Based on the following related "
        f"tickets, provide a summary and answer the user's question.\n\n"
        f"Retrieved Tickets: {retrieved}"
    )

    return [
        {"role": "system", "content": SYSTEM_SUMMARY},
        {"role": "user", "content": user_content},
    ]
