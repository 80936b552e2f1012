# src/tasks_mcp/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the MCP server, then serves it over stdio.
stdout belongs to the protocol; all diagnostics go to stderr.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_server
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    try:
        server = create_server(settings=settings)
        logger.info("Tasks MCP Server running on stdio")
        server.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
