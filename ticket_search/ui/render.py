"""
Render logic — turns session state into the view the page shows.

Everything here is a pure function of the session: no I/O, no mutation.
"""

from html import escape

from ticket_search.models.view import ButtonView, SessionView, TicketCard
from ticket_search.services.session_service import TicketSession

PAGE_TITLE = "Vector Search & AI Summary"
PAGE_DESCRIPTION = (
    "Search for tickets using natural language and get an AI-powered summary."
)
QUERY_PLACEHOLDER = (
    "Enter your query about a ticket or a business problem, "
    "e.g., 'What's the status of the login bug?'"
)
SEARCH_LABEL = "Find Relevant Tickets (Simulated DB)"
SUMMARIZE_LABEL = "Generate AI Summary (Simulated LLM)"
ERROR_MESSAGE = "An error occurred. Please check the logs and try again."


def search_disabled(session: TicketSession) -> bool:
    return session.state.is_loading_search or not session.query


def summarize_disabled(session: TicketSession) -> bool:
    return session.state.is_loading_summary or not session.state.held_tickets


def render_view(session: TicketSession) -> SessionView:
    """Build the view model for ``session``."""
    state = session.state

    return SessionView(
        session_id=session.session_id,
        phase=state.phase,
        query=session.query,
        search_button=ButtonView(
            label=SEARCH_LABEL,
            disabled=search_disabled(session),
            loading=state.is_loading_search,
        ),
        summarize_button=ButtonView(
            label=SUMMARIZE_LABEL,
            disabled=summarize_disabled(session),
            loading=state.is_loading_summary,
        ),
        error=ERROR_MESSAGE if state.is_error else None,
        tickets=[
            TicketCard(
                id=t.id,
                title=t.title,
                description=t.description,
                keywords=", ".join(t.keywords),
            )
            for t in state.held_tickets
        ],
        summary=state.summary_text or session.notice or None,
    )


# ── HTML ────────────────────────────────────────────────


def render_html(view: SessionView) -> str:
    """Render a view model as a standalone HTML page."""
    panels = ""

    if view.error:
        panels += (
            '<div class="alert" role="alert"><h2>Error</h2>'
            f"<p>{escape(view.error)}</p></div>\n"
        )

    if view.tickets:
        cards = "\n".join(
            f'<div class="ticket" id="{escape(t.id)}">'
            f"<h3>{escape(t.title)}</h3>"
            f"<p>{escape(t.description)}</p>"
            f'<p class="keywords">Keywords: {escape(t.keywords)}</p></div>'
            for t in view.tickets
        )
        panels += (
            f'<section class="results"><h2>Retrieved Tickets</h2>\n{cards}\n</section>\n'
        )

    if view.summary:
        panels += (
            '<section class="summary"><h2>AI Summary</h2>'
            f"<pre>{escape(view.summary)}</pre></section>\n"
        )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{escape(PAGE_TITLE)}</title>
</head>
<body>
<header><h1>{escape(PAGE_TITLE)}</h1><p>{escape(PAGE_DESCRIPTION)}</p></header>
<main>
<textarea name="query" rows="4" placeholder="{escape(QUERY_PLACEHOLDER)}">{escape(view.query)}</textarea>
{_button("search", view.search_button)}
{_button("summarize", view.summarize_button)}
{panels}</main>
</body>
</html>
"""


def _button(action: str, button: ButtonView) -> str:
    attrs = f'type="button" data-action="{action}"'
    if button.disabled:
        attrs += " disabled"
    if button.loading:
        attrs += ' aria-busy="true"'
    return f"<button {attrs}>{escape(button.label)}</button>"
