import logging
from typing import Any, Optional

from mcp.types import CallToolResult, TextContent

from u301mcp.client.u301_client import U301ApiClient
from u301mcp.config import U301Config
from u301mcp.Error.u301_error import EmptyResponseError
from u301mcp.schemas import MAX_BATCH_SIZE, validate_batch
from u301mcp.tools.formatting import format_results

logger = logging.getLogger(__name__)

TOOL_NAME = "u301_shortening_urls_in_bulk"


def build_tool_description(domain: str) -> str:
    params = [
        "url: required, the URL to be shortened",
        f"slug: optional, a custom slug for the shortened URL, the final shortened URL will be https://{domain}/<slug>\n"
        "    if you leave it empty, random slug will create",
        "expiredAt: optional, the expiration date for the shortened URL, e.g. 2023-01-01T00:00:00Z",
        "password: optional, a password for the shortened URL",
        "comment: optional, a comment, displayed on the dashboard",
    ]
    return (
        f"Use U301's short link service API to batch shorten long URLs. "
        f"Custom domains are supported, with up to {MAX_BATCH_SIZE} URLs per request.\n"
        'You should provide as "{ urls: <URLItem>[]}"\n'
        f"Current ShortLink domain is {domain}\n"
        "URLItem Supported Parameters are\n" + "\n".join(params)
    )


def _text_result(text: str, is_error: bool) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


async def shorten_urls_in_bulk(
    urls: Any,
    config: U301Config,
    client: Optional[U301ApiClient] = None,
) -> CallToolResult:
    """
    Shorten up to 200 URLs with one U301 bulk request and report each result.

    Every failure on the way (bad input, unreachable API, error status) comes
    back as an error result with text "Error: <message>" instead of raising.
    URLs the API refused individually are listed in a successful result.
    """
    owns_client = client is None
    try:
        items = validate_batch(urls)
        if owns_client:
            client = U301ApiClient(config)
        links = await client.shorten_bulk(items)
        if links is None:
            raise EmptyResponseError("No response from U301 API")
        logger.info(f"Shortened batch of {len(items)} URLs")
        return _text_result(format_results(links), is_error=False)
    except Exception as e:
        logger.exception(f"{TOOL_NAME} failed")
        return _text_result(f"Error: {e}", is_error=True)
    finally:
        if owns_client and client is not None:
            await client.close()
