"""
Pydantic models for API request bodies and the rendered session view.
"""

from pydantic import BaseModel, Field


# ── Incoming request bodies ─────────────────────────────


class CreateSessionRequest(BaseModel):
    """Body accepted by POST /sessions."""

    query: str = Field(default="", description="Initial query text")


class QueryUpdate(BaseModel):
    """Body accepted by PUT /sessions/{id}/query."""

    query: str = Field(..., description="Free-text query, may be empty")


# ── Rendered view ───────────────────────────────────────


class ButtonView(BaseModel):
    label: str
    disabled: bool
    loading: bool = False


class TicketCard(BaseModel):
    """One entry of the results panel."""

    id: str
    title: str
    description: str
    keywords: str = Field(..., description="Comma-joined keywords")


class SessionView(BaseModel):
    """Everything the page shows, derived from session state alone.

    A panel is hidden when its field is empty: ``error`` and ``summary`` are
    None, ``tickets`` is an empty list.
    """

    session_id: str
    phase: str
    query: str
    search_button: ButtonView
    summarize_button: ButtonView
    error: str | None = None
    tickets: list[TicketCard] = Field(default_factory=list)
    summary: str | None = None
