#
# Copyright contributors to the netprobe project
#
from __future__ import annotations
from mcp.server.fastmcp import FastMCP
import logging
from .settings import SETTINGS
from .plugins import net


def create_app() -> FastMCP:
    """Create and configure a FastMCP instance with the probe tools."""
    # basic structured logging setup
    logging.basicConfig(level=SETTINGS.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    logger = logging.getLogger("netprobe.mcp.server")

    app = FastMCP(
        "Reachability_Probe_MCP",
        host=SETTINGS.host,
        port=SETTINGS.port,
        instructions=(
            "Probes the reachability of a single destination over UDP or TCP. "
            "Each call runs a bounded series of sequential attempts and returns "
            "one result per attempt with its round-trip time and failure "
            "classification."
        ),
    )

    # Attach plugin tool functions. Each plugin exposes its own attach() with @app.tool decorations.
    net.attach(app)
    logger.info("Probe tools attached", extra={"transport": SETTINGS.transport})

    return app


def main() -> None:
    """Entry point for running the MCP server."""
    app = create_app()
    app.run(transport=SETTINGS.transport)


if __name__ == "__main__":
    main()
