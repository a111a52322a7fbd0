from collections.abc import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from voting.core.config import Settings


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_app_settings(request: Request) -> Settings:
    """Settings the app was built with; fixed for the process lifetime."""
    return request.app.state.settings
