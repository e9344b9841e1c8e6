# =============================================================================
# core/config.py  —  Runtime settings
# =============================================================================
#
# Every knob is an environment variable.  A local .env file is picked up by
# load_dotenv() in the entry points (tools/mcp_server.py, main.py) before this
# module is imported, so values placed there land here too.
#
#   NBP_API_BASE         Upstream base URL           (https://api.nbp.pl/api)
#   NBP_REQUEST_TIMEOUT  Per-request timeout, sec    (10)
#   MCP_TRANSPORT        stdio | sse | http          (stdio)
#   MCP_HOST / MCP_PORT  Bind address for sse/http   (0.0.0.0 / 8000)
#   LOG_LEVEL            Python logging level name   (INFO)
#   AGENT_MODEL          LiteLlm model string        (openrouter/openai/gpt-4o)
# =============================================================================

import os
from dataclasses import dataclass, field

NBP_API_BASE = "https://api.nbp.pl/api"
REQUEST_TIMEOUT_SECONDS = 10.0

TRANSPORTS = ("stdio", "sse", "http")


def _env(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


@dataclass
class Settings:
    """Process-wide configuration read once from the environment."""

    api_base: str = field(default_factory=lambda: _env("NBP_API_BASE", NBP_API_BASE).rstrip("/"))
    request_timeout: float = field(
        default_factory=lambda: float(_env("NBP_REQUEST_TIMEOUT", str(REQUEST_TIMEOUT_SECONDS)))
    )
    transport: str = field(default_factory=lambda: _env("MCP_TRANSPORT", "stdio").lower())
    host: str = field(default_factory=lambda: _env("MCP_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("MCP_PORT", "8000")))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO").upper())
    agent_model: str = field(default_factory=lambda: _env("AGENT_MODEL", "openrouter/openai/gpt-4o"))

    def __post_init__(self) -> None:
        if self.transport not in TRANSPORTS:
            raise ValueError(
                f"MCP_TRANSPORT must be one of {', '.join(TRANSPORTS)}, got {self.transport!r}"
            )
        if self.request_timeout <= 0:
            raise ValueError("NBP_REQUEST_TIMEOUT must be a positive number of seconds")


# Global settings instance
settings = Settings()
