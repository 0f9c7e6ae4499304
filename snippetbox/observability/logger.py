# snippetbox/observability/logger.py

# structured JSON logger
import logging
import os
import sys

from pythonjsonlogger.json import JsonFormatter

from snippetbox.config import Settings

LOG_FILE_NAME = "snippetbox.log"

# Marks handlers installed here so repeated configuration does not stack them
_HANDLER_ATTR = "_snippetbox_handler"


def build_formatter() -> logging.Formatter:
    return JsonFormatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
        rename_fields={"levelname": "level", "name": "logger", "asctime": "time"},
    )


def _install(root: logging.Logger, handler: logging.Handler, formatter: logging.Formatter) -> None:
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)


def configure_logging(settings: Settings) -> None:
    """Configure root logging with JSON output.

    - A JSON console handler (stdout) on the root logger.
    - A JSON file handler under LOGS_PATH when it is set.
    - Safe to call more than once: previously installed handlers are replaced.
    """
    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_ATTR, False):
            root.removeHandler(h)
            h.close()

    formatter = build_formatter()
    _install(root, logging.StreamHandler(stream=sys.stdout), formatter)

    if settings.LOGS_PATH:
        os.makedirs(settings.LOGS_PATH, exist_ok=True)
        log_file = os.path.join(settings.LOGS_PATH, LOG_FILE_NAME)
        _install(root, logging.FileHandler(log_file, encoding="utf-8"), formatter)

    # SQLAlchemy echoes through its own logger when DEBUG is on
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )

    logging.getLogger("startup").info("logging configured", extra={"log_level": settings.LOG_LEVEL})
