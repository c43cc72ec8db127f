"""
Ticket catalog — the fixed demonstration tickets, optionally replaced by a
YAML file at ``TICKET_CATALOG_PATH``.
"""

from structlog import get_logger

from ticket_search.core.config import load_ticket_catalog
from ticket_search.models.tickets import Ticket, TicketCatalog

logger = get_logger()

DEFAULT_TICKETS: tuple[Ticket, ...] = (
    Ticket(
        id="TKT-101",
        title="Failed login attempts on production",
        description=(
            "Users are reporting that their login attempts are failing with a "
            "generic error message after three consecutive tries. The issue "
            "seems to be related to the rate-limiting feature introduced in "
            "the last deployment. This is a high-priority bug."
        ),
        keywords=["login", "authentication", "rate-limiting", "bug", "production"],
    ),
    Ticket(
        id="TKT-102",
        title="Update dashboard UI for better readability",
        description=(
            "The current dashboard layout is cluttered and difficult to read. "
            "We need to update the color scheme, font sizes, and card layouts "
            "to improve the user experience. This is a UX improvement task."
        ),
        keywords=["UI", "UX", "dashboard", "redesign", "frontend"],
    ),
    Ticket(
        id="TKT-103",
        title="Investigate slow database queries",
        description=(
            "The API endpoint for fetching user data is experiencing "
            "significant latency. We suspect some database queries are "
            "inefficient and need to be optimized. This task requires a "
            "backend developer to profile and refactor the queries."
        ),
        keywords=["database", "performance", "latency", "backend", "optimization"],
    ),
    Ticket(
        id="TKT-104",
        title="Implement new user signup flow",
        description=(
            "We need to create a new, more streamlined user registration "
            "process. This includes a new form, email verification, and a "
            "welcome page. The new flow should be intuitive and guide the "
            "user effectively."
        ),
        keywords=["signup", "onboarding", "user flow", "registration", "frontend"],
    ),
)


def get_ticket_catalog() -> list[Ticket]:
    """Return the tickets searches run against.

    Raises:
        pydantic.ValidationError: If the YAML override is malformed.
    """
    raw = load_ticket_catalog()
    if not raw:
        return list(DEFAULT_TICKETS)

    catalog = TicketCatalog.model_validate(raw)
    logger.debug("ticket_catalog_loaded", tickets=len(catalog.tickets))
    return catalog.tickets
