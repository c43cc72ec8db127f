"""
Sessions API — create a session, edit its query, trigger search/summarize
and read back the rendered view.
"""

from fastapi import APIRouter, HTTPException, Query, Response
from fastapi.responses import HTMLResponse
from structlog import get_logger

from ticket_search.models.view import CreateSessionRequest, QueryUpdate, SessionView
from ticket_search.services.session_service import TicketSession
from ticket_search.services.session_store import session_store
from ticket_search.ui.render import (
    render_html,
    render_view,
    search_disabled,
    summarize_disabled,
)

logger = get_logger()

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.post("", status_code=201)
async def create_session(body: CreateSessionRequest | None = None) -> SessionView:
    """Start a new session, optionally with an initial query."""
    session = await session_store.create(query=body.query if body else "")
    return render_view(session)


@router.get("/{session_id}")
async def get_view(session_id: str) -> SessionView:
    """Return the current view of a session."""
    return render_view(_get_session(session_id))


@router.get("/{session_id}/page", response_class=HTMLResponse)
async def get_page(session_id: str) -> HTMLResponse:
    """Return the current view of a session as an HTML page."""
    view = render_view(_get_session(session_id))
    return HTMLResponse(render_html(view))


@router.put("/{session_id}/query")
async def update_query(session_id: str, body: QueryUpdate) -> SessionView:
    session = _get_session(session_id)
    session.query = body.query
    return render_view(session)


@router.post("/{session_id}/search")
async def search(
    session_id: str,
    wait: bool = Query(False, description="Wait for the search to settle"),
) -> SessionView:
    """Trigger a search.

    - Rejected with 409 while the search button would be disabled.
    - Runs in the background unless ``wait`` is set; poll the view for the
      result.
    """
    session = _get_session(session_id)
    if search_disabled(session):
        logger.warning("search_rejected", session=session_id, phase=session.state.phase)
        raise HTTPException(
            status_code=409,
            detail="Search is unavailable: the query is empty or a search is running.",
        )

    if wait:
        await session.search()
    else:
        session.start_search()
    return render_view(session)


@router.post("/{session_id}/summarize")
async def summarize(
    session_id: str,
    wait: bool = Query(False, description="Wait for the summary to settle"),
) -> SessionView:
    """Trigger a summary of the held results (same rules as search)."""
    session = _get_session(session_id)
    if summarize_disabled(session):
        logger.warning("summarize_rejected", session=session_id, phase=session.state.phase)
        raise HTTPException(
            status_code=409,
            detail="Summarize is unavailable: no results are held or a summary is running.",
        )

    if wait:
        await session.summarize()
    else:
        session.start_summarize()
    return render_view(session)


@router.delete("/{session_id}", status_code=204)
async def delete_session(session_id: str) -> Response:
    if not await session_store.discard(session_id):
        raise HTTPException(status_code=404, detail=f"Unknown session '{session_id}'")
    return Response(status_code=204)


def _get_session(session_id: str) -> TicketSession:
    session = session_store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown session '{session_id}'")
    return session
