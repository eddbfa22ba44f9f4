"""
Logging setup shared by the API server and the CLI.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, once, on the package logger.
"""

import json
import logging
from datetime import datetime, timezone

PACKAGE_LOGGER = "tripflow"

TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object per line."""
    
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def configure_logging(level: str = "INFO", fmt: str = "text") -> logging.Logger:
    """
    Configure the ``tripflow`` logger.
    
    Calling this again replaces the previously installed handler, so the
    API lifespan and CLI commands can both call it safely.
    
    Args:
        level: Standard logging level name
        fmt: "json" for JSON lines, anything else for plain text
        
    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    
    for handler in list(logger.handlers):
        if handler.get_name() == PACKAGE_LOGGER:
            logger.removeHandler(handler)
    
    handler = logging.StreamHandler()
    handler.set_name(PACKAGE_LOGGER)
    handler.setFormatter(JsonFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT))
    
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
