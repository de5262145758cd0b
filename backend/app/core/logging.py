import logging
import sys

from app.core.config import LOG_LEVEL

logger = logging.getLogger("github-activity-mcp")


def configure_logging(level: str = LOG_LEVEL) -> None:
    # stdout carries the MCP stdio transport
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
