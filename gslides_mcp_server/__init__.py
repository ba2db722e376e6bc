"""
Google Slides MCP Server - remote presentation editing over MCP.

This MCP server provides tools for:
- Creating presentations
- Fetching presentations and individual pages
- Applying batches of update requests
- Extracting slide text and speaker notes for summarization
"""

from .server import main

__all__ = ["main"]
