# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server (tools/mcp_server.py).
#
# ARCHITECTURAL ROLE:
#   tools/ is the translation layer between MCP clients and core/.  It:
#     1. Declares each tool's name, description and input schema
#     2. Validates arguments before anything touches the network
#     3. Calls exactly one core/nbp_client.py function
#     4. Serializes the result, or an "Error: ..." envelope on failure
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build URLs or parse upstream JSON (that's core/)
#   - They do NOT keep state between calls
#   - They do NOT know about Google ADK
# =============================================================================
