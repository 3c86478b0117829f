"""Run the HERE Maps MCP server over stdio.

The HERE_MAPS_API_KEY environment variable (or a .env entry) is required;
the process exits with status 1 when it is missing.
"""

from __future__ import annotations

from heremaps_mcp.core.config import load_settings
from heremaps_mcp.core.exceptions import ConfigurationError
from heremaps_mcp.core.logging_config import configure_logging, get_logger
from heremaps_mcp.mcp.server import run_server

logger = get_logger(__name__)


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        configure_logging(level="ERROR")
        logger.error("configuration_invalid", error=str(exc))
        raise SystemExit(1) from exc

    configure_logging()

    try:
        run_server(settings)
    except KeyboardInterrupt:
        logger.info("server_stopped")
    except Exception as exc:
        logger.exception("server_crashed")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
