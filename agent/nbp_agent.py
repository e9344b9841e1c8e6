# =============================================================================
# agent/nbp_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the ADK agent that answers exchange-rate questions by calling the
#   NBP MCP tool server.
#
#   ┌─────────────────────────────┐        ┌──────────────────────────┐
#   │  Google ADK Agent           │  MCP   │  FastMCP Server          │
#   │  prompt + LiteLlm model     │──────▶ │  (tools/mcp_server.py)   │
#   │                             │ stdio  │  • getCurrencyRate       │
#   └─────────────────────────────┘        │  • getGoldPrice          │
#                                          │  • getCurrencyHistory    │
#                                          └────────────┬─────────────┘
#                                                       ▼
#                                              core/ → api.nbp.pl
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess (stdio transport) and
#   discovers the three tools from it.  The subprocess runs from the project
#   root via "uv run" so it sees the same virtual environment.
#
# MODEL:
#   Any LiteLlm model string, from the AGENT_MODEL setting
#   (default "openrouter/openai/gpt-4o"; LiteLlm reads OPENROUTER_API_KEY).
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_exchange_advisor_prompt
from core.config import settings

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def create_toolset() -> MCPToolset:
    """Connection to the NBP tool server, spawned over stdio."""
    return MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server", "--transport", "stdio"],
            cwd=PROJECT_ROOT,
        ),
    )


def create_agent(model: str | None = None) -> Agent:
    """Create the NBP exchange-rate assistant.

    Args:
        model: LiteLlm model string; defaults to settings.agent_model.

    Returns:
        A configured Google ADK Agent instance.
    """
    return Agent(
        name="nbp_exchange_assistant",
        model=LiteLlm(model=model or settings.agent_model),
        instruction=get_exchange_advisor_prompt(),
        tools=[create_toolset()],
    )
