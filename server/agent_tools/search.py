"""Web search tool.

This does not query a search engine: it builds a search URL for the query,
either on Google or on a caller-supplied search page.
"""

from typing import Any, List, Mapping, Optional
from urllib.parse import quote, urlparse

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ToolError, ToolValidationError
from .results import ToolResult, format_validation_error

TOOL_ID = "web-search"
ERROR_PREFIX = "Web search error: "
GOOGLE_SEARCH_URL = "https://www.google.com/search"


class SearchRequest(BaseModel):
    query: str = Field(description="Search query or keywords")
    base_url: Optional[str] = Field(
        default=None,
        description="Optional custom base URL for search (defaults to Google)",
    )

    @field_validator("base_url")
    @classmethod
    def _check_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            raise ValueError("Invalid url")
        return value


class SearchResult(BaseModel):
    title: str
    url: str
    snippet: str
    platform: str
    relevance: float


class SearchData(BaseModel):
    results: List[SearchResult]
    total_matches: int
    query: str


def _platforms(query: str, base_url: Optional[str]) -> List[dict]:
    encoded = quote(query, safe="!'()*-._~")
    if base_url:
        separator = "&" if "?" in base_url else "?"
        domain = urlparse(base_url).hostname
        return [{
            "platform": domain,
            "url": f"{base_url}{separator}q={encoded}",
            "title": f"{query} - {domain}",
            "snippet": f'Search results for "{query}" on {domain}',
        }]
    return [{
        "platform": "Google",
        "url": f"{GOOGLE_SEARCH_URL}?q={encoded}",
        "title": f"{query} - Google Search",
        "snippet": f'General web search results for "{query}"',
    }]


def web_search(payload: Mapping[str, Any]) -> ToolResult:
    try:
        request = SearchRequest.model_validate(dict(payload))
    except ValidationError as e:
        return ToolResult.failure(ToolValidationError(format_validation_error(e, TOOL_ID)))

    try:
        results = [
            SearchResult(relevance=1 - index * 0.15, **platform)
            for index, platform in enumerate(_platforms(request.query, request.base_url))
        ]
        data = SearchData(results=results, total_matches=len(results), query=request.query)
        return ToolResult.ok(data, f'Found {len(results)} web search results for "{request.query}"')
    except ToolError as e:
        return ToolResult.failure(e, prefix=ERROR_PREFIX)
