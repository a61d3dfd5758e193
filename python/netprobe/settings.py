"""
Copyright contributors to the netprobe project
"""

"""Application settings using Pydantic and dotenv.

This module loads environment variables from a `.env` file (if present)
and exposes a `Settings` object. Probe defaults (per-attempt timeout and
attempt count) and the log level apply to every entry point; the MCP
server additionally binds to all interfaces on port 8000 and uses the
`streamable-http` transport unless overridden.
"""

from pydantic import BaseModel
from dotenv import load_dotenv
import os

# Load environment variables from a .env file if present
load_dotenv()


class Settings(BaseModel):
    """Configuration values for probe runs and the MCP server.

    Attributes
    ----------
    default_timeout : float
        Per-attempt deadline in seconds applied when a request leaves
        ``timeout`` unset or zero. Defaults to 5.
    default_count : int
        Number of attempts applied when a request leaves ``count`` unset
        or zero. Defaults to 3.
    log_level : str
        Root log level used by the CLI and the server. Defaults to
        ``INFO``.
    host : str
        Host address to bind the MCP server to. Defaults to `0.0.0.0`.
    port : int
        Port number for the MCP server. Defaults to 8000.
    transport : str
        Transport mechanism used by FastMCP. Defaults to
        ``streamable-http`` which exposes an HTTP endpoint.
    """

    default_timeout: float = float(os.getenv("PROBE_DEFAULT_TIMEOUT", "5"))
    default_count: int = int(os.getenv("PROBE_DEFAULT_COUNT", "3"))
    log_level: str = os.getenv("PROBE_LOG_LEVEL", "INFO")
    host: str = os.getenv("MCP_HOST", "0.0.0.0")
    port: int = int(os.getenv("MCP_PORT", "8000"))
    transport: str = os.getenv("MCP_TRANSPORT", "streamable-http")


# Expose a singleton settings object for convenient import
SETTINGS = Settings()
