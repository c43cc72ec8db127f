"""
Ticket Search & AI Summary — FastAPI application entry point.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from structlog import get_logger

from ticket_search.api.sessions import router as sessions_router
from ticket_search.context.catalog import get_ticket_catalog
from ticket_search.core.config import settings
from ticket_search.core.logging import configure_logging
from ticket_search.services.session_store import session_store

VERSION = "0.1.0"

logger = get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan: startup + shutdown hooks."""
    configure_logging(settings.LOG_LEVEL)
    logger.info("startup", service="ticket-search", version=VERSION)
    yield
    # Cancel whatever searches/summaries are still pending
    await session_store.close()
    logger.info("shutdown", service="ticket-search")


app = FastAPI(
    title="Ticket Search & AI Summary",
    description=(
        "Search tickets with natural language and get an AI-style summary "
        "of the results. Retrieval and summarization are simulated."
    ),
    version=VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(sessions_router)


@app.get("/")
async def root():
    """Health check."""
    return {
        "status": "healthy",
        "service": "ticket-search",
        "version": VERSION,
    }


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "sessions": len(session_store),
        "catalog_tickets": len(get_ticket_catalog()),
        "search_delay_seconds": settings.SEARCH_DELAY_SECONDS,
        "summary_delay_seconds": settings.SUMMARY_DELAY_SECONDS,
    }
