"""Logging configuration for the application entrypoints (modules only ever call logging.getLogger(__name__))"""

import logging

from src.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    # SQLAlchemy has its own echo flag, keep its loggers quiet otherwise
    if not settings.echo_sql:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
