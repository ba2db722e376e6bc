"""
Entry point for running the Google Slides MCP Server as a module.
Allows: python -m gslides_mcp_server
"""

from .server import main

if __name__ == "__main__":
    main()
