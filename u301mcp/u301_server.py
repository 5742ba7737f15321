import logging
import os
import sys
from typing import List

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult

from u301mcp import NAME
from u301mcp.config import U301Config, load_config
from u301mcp.Error.u301_error import ConfigurationError
from u301mcp.schemas import ShortenRequestItem
from u301mcp.tools import TOOL_NAME, build_tool_description, shorten_urls_in_bulk


def build_server(config: U301Config) -> FastMCP:
    mcp = FastMCP(NAME, instructions="Shorten URLs in bulk using U301 API")

    async def u301_shortening_urls_in_bulk(urls: List[ShortenRequestItem]) -> CallToolResult:
        return await shorten_urls_in_bulk(urls, config)

    mcp.tool(
        name=TOOL_NAME,
        description=build_tool_description(config.domain),
        structured_output=False,
    )(u301_shortening_urls_in_bulk)
    return mcp


def main():
    # stdout carries the MCP stream, so logs go to stderr
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config()
    except ConfigurationError as e:
        logging.error(f"Error: {e}")
        sys.exit(1)

    mcp = build_server(config)
    logging.info("U301 MCP Server running on stdio")
    try:
        mcp.run(transport="stdio")
    except Exception:
        logging.exception("Fatal error when running MCP Server")
        sys.exit(1)


if __name__ == "__main__":
    main()
