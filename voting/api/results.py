"""Results service endpoints: HTML view, JSON API and bulk delete."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from sqlalchemy.orm import Session

from voting.api.deps import get_db
from voting.core.errors import StorageError
from voting.schemas.results import ErrorResponse, ResultsResponse
from voting.services.results import delete_all_votes, get_tally
from voting.views.results_page import render_results_page

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def results_page(deleted: str | None = None, db: Session = Depends(get_db)) -> HTMLResponse:
    logger.debug("Results page accessed")
    try:
        tally = get_tally(db)
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error retrieving results",
        ) from None
    return HTMLResponse(render_results_page(tally, deleted=bool(deleted)))


@router.post("/delete-all")
def delete_all(db: Session = Depends(get_db)) -> RedirectResponse:
    """Remove every vote. Confirmation is the caller's job."""
    try:
        delete_all_votes(db)
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error deleting votes",
        ) from None
    return RedirectResponse(url="/?deleted=1", status_code=status.HTTP_303_SEE_OTHER)


@router.get(
    "/api/results",
    response_model=ResultsResponse,
    responses={500: {"model": ErrorResponse}},
)
def api_results(db: Session = Depends(get_db)):
    try:
        tally = get_tally(db)
    except StorageError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error="Error retrieving results").model_dump(),
        )
    return ResultsResponse.from_tally(tally)
