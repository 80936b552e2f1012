"""MCP server exposing a remote task API as agent tools."""

__version__ = "1.0.0"
