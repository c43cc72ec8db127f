"""Tests for the summary prompt builder and the stub summarizer."""

import pytest

from ticket_search.context.catalog import DEFAULT_TICKETS
from ticket_search.core.config import settings
from ticket_search.llm.prompts import build_summary_prompt
from ticket_search.llm.summarizer import (
    NO_TICKETS_FOUND,
    compose_placeholder_summary,
    summarize_tickets,
)

LOGIN, DASHBOARD, DATABASE, SIGNUP = DEFAULT_TICKETS


class TestSummaryPrompt:
    def test_structure(self):
        messages = build_summary_prompt("login bug", [LOGIN])

        assert len(messages) == 2
        assert messages[0]["role"] == "system"
        assert messages[1]["role"] == "user"

    def test_contains_query_and_tickets(self):
        messages = build_summary_prompt("login bug", [LOGIN, DATABASE])
        user = messages[1]["content"]

        assert "The user's query is: 'login bug'" in user
        assert "TKT-101" in user
        assert "TKT-103" in user
        assert "rate-limiting" in user  # keywords travel with the ticket


class TestPlaceholderSummary:
    def test_header(self):
        summary = compose_placeholder_summary("login", [LOGIN])
        assert summary.startswith(
            'Based on your search for "login", I found the following relevant tickets:\n\n'
        )

    def test_one_bullet_per_ticket(self):
        summary = compose_placeholder_summary("user", [LOGIN, SIGNUP])

        bullets = [line for line in summary.splitlines() if line.startswith("- ")]
        assert bullets == [
            f"- **{LOGIN.title}** (TKT-101): {LOGIN.description[:80]}...",
            f"- **{SIGNUP.title}** (TKT-104): {SIGNUP.description[:80]}...",
        ]

    def test_closing_sentence(self):
        summary = compose_placeholder_summary("login", [LOGIN])
        assert summary.endswith(
            "you would send this information to an AI model like gpt-4o-mini "
            'with a prompt like: "Summarize the key information from these '
            "tickets and answer the user's question: 'login'\".\n"
        )

    def test_preview_length_setting(self, monkeypatch):
        monkeypatch.setattr(settings, "SUMMARY_PREVIEW_CHARS", 10)
        summary = compose_placeholder_summary("login", [LOGIN])
        assert f"(TKT-101): {LOGIN.description[:10]}...\n" in summary

    def test_no_tickets(self):
        summary = compose_placeholder_summary("nothing", [])
        assert summary.endswith(NO_TICKETS_FOUND)
        assert "- **" not in summary


class TestSummarizeTickets:
    @pytest.mark.asyncio
    async def test_returns_placeholder(self):
        summary = await summarize_tickets("dashboard", [DASHBOARD], delay=0)
        assert summary == compose_placeholder_summary("dashboard", [DASHBOARD])
