"""Console entry points that start one of the two services under uvicorn."""

import logging
import sys
from collections.abc import Callable

import uvicorn
from fastapi import FastAPI

from voting import results_app, vote_app
from voting.core.config import ServiceName, Settings, get_settings
from voting.core.errors import StartupError
from voting.core.logging import configure_logging
from voting.db.migrate import run_migrations

logger = logging.getLogger(__name__)

AppFactory = Callable[..., FastAPI]


def serve(service: ServiceName, factory: AppFactory) -> None:
    """Create the votes table, then serve until interrupted.

    A migration failure is fatal: it is logged and the process exits with
    status 1 without opening the listening socket.
    """
    settings: Settings = get_settings()
    configure_logging(settings.log_level)

    app = factory(settings, migrate_on_startup=False)
    try:
        run_migrations(app.state.engine)
    except StartupError:
        logger.error("Failed to start %s service", service)
        sys.exit(1)

    port = settings.port_for(service)
    logger.info("%s service listening on %s:%d", service.capitalize(), settings.host, port)
    uvicorn.run(
        app,
        host=settings.host,
        port=port,
        log_level=settings.log_level.lower(),
    )


def vote_main() -> None:
    serve("vote", vote_app.create_app)


def results_main() -> None:
    serve("results", results_app.create_app)


if __name__ == "__main__":
    targets = {"vote": vote_main, "results": results_main}
    if len(sys.argv) != 2 or sys.argv[1] not in targets:
        print("Usage: python -m voting.scripts.serve {vote|results}", file=sys.stderr)
        sys.exit(2)
    targets[sys.argv[1]]()
