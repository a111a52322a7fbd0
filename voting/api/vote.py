"""Vote service endpoints: voting form and vote submission."""

import logging

from fastapi import APIRouter, Depends, Form, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from voting.api.deps import get_app_settings, get_db
from voting.core.config import Settings
from voting.core.errors import StorageError, ValidationError
from voting.services.vote import cast_vote
from voting.views.vote_page import render_vote_page

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def vote_page(
    success: str | None = None,
    settings: Settings = Depends(get_app_settings),
) -> HTMLResponse:
    logger.debug("Vote page accessed")
    return HTMLResponse(render_vote_page(settings.options, success=bool(success)))


@router.post("/vote")
def submit_vote(
    option: str | None = Form(None),
    settings: Settings = Depends(get_app_settings),
    db: Session = Depends(get_db),
) -> RedirectResponse:
    """Record one vote and send the browser back to the form."""
    try:
        cast_vote(db, option, settings.options)
    except ValidationError:
        logger.warning("Invalid vote option received: %r", option)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid option"
        ) from None
    except StorageError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error saving vote"
        ) from None

    return RedirectResponse(url="/?success=1", status_code=status.HTTP_303_SEE_OTHER)
