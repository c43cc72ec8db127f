"""
Session phases — the view state of one search/summarize session.

The loading/error flags and held results are derived from a single ``phase``
value, so combinations like "summary present while a search is loading"
cannot be represented.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from ticket_search.models.tickets import Ticket


class _Phase(BaseModel):
    model_config = ConfigDict(frozen=True)

    phase: str

    @property
    def held_tickets(self) -> list[Ticket]:
        return list(getattr(self, "tickets", []))

    @property
    def summary_text(self) -> str:
        return getattr(self, "summary", "")

    @property
    def is_loading_search(self) -> bool:
        return self.phase == "searching"

    @property
    def is_loading_summary(self) -> bool:
        return self.phase == "summarizing"

    @property
    def is_error(self) -> bool:
        return self.phase in ("search_failed", "summary_failed")


class Idle(_Phase):
    phase: Literal["idle"] = "idle"


class Searching(_Phase):
    phase: Literal["searching"] = "searching"
    query: str


class SearchFailed(_Phase):
    phase: Literal["search_failed"] = "search_failed"
    query: str


class Searched(_Phase):
    phase: Literal["searched"] = "searched"
    query: str
    tickets: list[Ticket] = Field(default_factory=list)


class Summarizing(_Phase):
    phase: Literal["summarizing"] = "summarizing"
    query: str
    tickets: list[Ticket] = Field(..., min_length=1)


class SummaryFailed(_Phase):
    phase: Literal["summary_failed"] = "summary_failed"
    query: str
    tickets: list[Ticket] = Field(..., min_length=1)


class Summarized(_Phase):
    phase: Literal["summarized"] = "summarized"
    query: str
    tickets: list[Ticket] = Field(..., min_length=1)
    summary: str = Field(..., min_length=1)


SessionState = Annotated[
    Idle
    | Searching
    | SearchFailed
    | Searched
    | Summarizing
    | SummaryFailed
    | Summarized,
    Field(discriminator="phase"),
]
