from .shorten_urls_in_bulk import TOOL_NAME, build_tool_description, shorten_urls_in_bulk
from .formatting import format_results

__all__ = ['TOOL_NAME', 'build_tool_description', 'shorten_urls_in_bulk', 'format_results']
