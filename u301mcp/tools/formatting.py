from typing import Any, Optional, Sequence

from u301mcp.schemas import ShortenedURLFailure, ShortenResult


def _or_na(value: Any) -> Any:
    return "N/A" if value is None else value


def format_result(index: int, link: ShortenResult) -> str:
    if isinstance(link, ShortenedURLFailure):
        return f"[{index}]: Failed to shorten {_or_na(link.url)}: {link.error} - {_or_na(link.message)}"

    items = [
        f"Index: {index}",
        f"Id: {_or_na(link.id)}",
        f"Original URL: {link.url}",
        f"Short Link: {link.shortLink}",
        f"Domain: {_or_na(link.domain)}",
        f"Reused: {'Yes' if link.isReused else 'No'}",
        f"Comment: {link.comment or 'N/A'}",
    ]
    return "\n".join(items)


def format_results(links: Optional[Sequence[ShortenResult]]) -> str:
    """Render bulk results as text blocks separated by '---' lines, in input order."""
    return "\n---\n".join(format_result(i, link) for i, link in enumerate(links or []))
