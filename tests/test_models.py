"""Tests for Pydantic model validation."""

import pytest
from pydantic import TypeAdapter, ValidationError

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
from ticket_search.models.tickets import Ticket, TicketCatalog
from ticket_search.models.view import QueryUpdate


def _ticket(ticket_id: str = "TKT-1") -> Ticket:
    return Ticket(id=ticket_id, title="Title", description="Description")


class TestTicket:
    def test_valid(self):
        t = Ticket(
            id="TKT-101",
            title="Failed login",
            description="Users cannot log in",
            keywords=["login", "bug"],
        )
        assert t.id == "TKT-101"
        assert t.keywords == ["login", "bug"]

    def test_keywords_default_empty(self):
        assert _ticket().keywords == []

    def test_missing_title(self):
        with pytest.raises(ValidationError):
            Ticket(id="TKT-1", description="desc")

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            Ticket(id="", title="t", description="d")

    def test_frozen(self):
        t = _ticket()
        with pytest.raises(ValidationError):
            t.title = "changed"


class TestTicketCatalog:
    def test_valid(self):
        catalog = TicketCatalog.model_validate(
            {
                "tickets": [
                    {"id": "A-1", "title": "One", "description": "first"},
                    {"id": "A-2", "title": "Two", "description": "second"},
                ]
            }
        )
        assert [t.id for t in catalog.tickets] == ["A-1", "A-2"]

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate ticket id"):
            TicketCatalog(tickets=[_ticket("A-1"), _ticket("A-1")])


class TestSessionPhases:
    def test_idle_flags(self):
        state = Idle()
        assert not state.is_loading_search
        assert not state.is_loading_summary
        assert not state.is_error
        assert state.held_tickets == []
        assert state.summary_text == ""

    def test_searching_is_loading(self):
        state = Searching(query="login")
        assert state.is_loading_search
        assert not state.is_loading_summary
        assert state.held_tickets == []

    def test_search_failed_is_error(self):
        state = SearchFailed(query="login")
        assert state.is_error
        assert state.held_tickets == []

    def test_searched_holds_tickets(self):
        state = Searched(query="q", tickets=[_ticket()])
        assert [t.id for t in state.held_tickets] == ["TKT-1"]
        assert not state.is_error

    def test_summarizing_requires_tickets(self):
        with pytest.raises(ValidationError):
            Summarizing(query="q", tickets=[])

    def test_summary_failed_keeps_tickets(self):
        state = SummaryFailed(query="q", tickets=[_ticket()])
        assert state.is_error
        assert len(state.held_tickets) == 1

    def test_summarized_requires_text(self):
        with pytest.raises(ValidationError):
            Summarized(query="q", tickets=[_ticket()], summary="")

    def test_summarized_requires_tickets(self):
        with pytest.raises(ValidationError):
            Summarized(query="q", tickets=[], summary="text")

    def test_discriminated_by_phase(self):
        adapter = TypeAdapter(SessionState)
        state = adapter.validate_python(
            {
                "phase": "summarized",
                "query": "q",
                "tickets": [{"id": "X-1", "title": "t", "description": "d"}],
                "summary": "text",
            }
        )
        assert isinstance(state, Summarized)
        assert state.summary_text == "text"

    def test_unknown_phase_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(SessionState).validate_python({"phase": "exploded"})


class TestQueryUpdate:
    def test_empty_query_allowed(self):
        assert QueryUpdate(query="").query == ""

    def test_missing_query(self):
        with pytest.raises(ValidationError):
            QueryUpdate()
