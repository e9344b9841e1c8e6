# =============================================================================
# agent/__init__.py
# =============================================================================
# A demo Google ADK agent that consumes the NBP MCP tool server.
#
# ARCHITECTURAL ROLE:
#   The agent/ layer is a CLIENT of tools/mcp_server.py.  It:
#     1. Receives a question ("How much is 500 EUR in PLN at a bank today?")
#     2. Decides which NBP tools to call, and with which dates
#     3. Explains the numbers (bid vs ask, non-trading days) to the user
#
#   It holds no business logic; rates, validation and error handling all
#   live behind the MCP boundary.
# =============================================================================
