# =============================================================================
# core/__init__.py
# =============================================================================
# This package holds everything that talks to the NBP (Polish National Bank)
# public API: settings, result models, the error taxonomy and the HTTP client.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP or Google ADK.  The tool server
#   (tools/) and the demo agent (agent/) depend on core/, never the reverse.
# =============================================================================
