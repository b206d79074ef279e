import copy
import logging
import sys

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from .config import Settings, get_settings
from .main import app

logger = logging.getLogger("greeter")

STARTUP_MESSAGE = "Server Start"


def configure_logging(level: str = "info") -> None:
    """Send ``greeter`` log records to stderr as bare messages.

    Replaces any handler left by an earlier call so the stream is always the
    current ``sys.stderr``.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    # uvicorn has a "trace" level below debug; stdlib logging does not.
    logger.setLevel(logging.DEBUG if level == "trace" else level.upper())
    logger.propagate = False


def uvicorn_log_config() -> dict:
    """uvicorn's default logging config with access lines moved to stderr.

    Stdout carries only the startup line.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    config["handlers"]["access"]["stream"] = "ext://sys.stderr"
    return config


def run(settings: Settings | None = None) -> None:
    """Serve the greeting app until the process is killed.

    A listener that cannot bind is fatal: uvicorn logs the ``OSError`` and
    raises ``SystemExit`` with a non-zero code.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    print(STARTUP_MESSAGE, flush=True)
    logger.debug("Binding %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        log_config=uvicorn_log_config(),
        access_log=settings.access_log,
    )


def main() -> None:
    run()
