"""Tools exposed to the agents: GitHub, PDF extraction and web search."""

from .config import Settings
from .deps import AgentDeps
from .errors import (
    ErrorKind, ToolError, ToolValidationError, ApiError, TransportError,
    GitHubAPIError, GitHubTransportError,
)
from .results import ToolResult
from .github import run_github_tool
from .pdf import read_pdf
from .search import web_search

__all__ = [
    'Settings',
    'AgentDeps',

    # Errors
    'ErrorKind',
    'ToolError',
    'ToolValidationError',
    'ApiError',
    'TransportError',
    'GitHubAPIError',
    'GitHubTransportError',

    # Tools
    'ToolResult',
    'run_github_tool',
    'read_pdf',
    'web_search',
]
