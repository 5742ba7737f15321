"""MCP server for shortening URLs in bulk with the U301 API."""

NAME = "u301-url-shortener"
__version__ = "1.0.0"
