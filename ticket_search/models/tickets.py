"""
Ticket records and the catalog they are searched from.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Ticket(BaseModel):
    """A fixed demonstration record representing a support/work item."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Ticket id, e.g. TKT-101")
    title: str
    description: str
    keywords: list[str] = Field(default_factory=list)


class TicketCatalog(BaseModel):
    """The full set of tickets a search runs against."""

    tickets: list[Ticket] = Field(default_factory=list)

    @field_validator("tickets")
    @classmethod
    def _unique_ids(cls, tickets: list[Ticket]) -> list[Ticket]:
        seen: set[str] = set()
        for ticket in tickets:
            if ticket.id in seen:
                raise ValueError(f"Duplicate ticket id '{ticket.id}'")
            seen.add(ticket.id)
        return tickets
