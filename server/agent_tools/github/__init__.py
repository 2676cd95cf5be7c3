"""GitHub tool: issues and repository contents through the REST API."""

from .api import GitHubAPI, GitHubRequest, USER_AGENT
from .types import (
    Action, GitHubToolInput,
    GetIssueRequest, CreateIssueRequest, GetFileContentRequest, ListDirectoryContentsRequest,
    IssueData, IssueAuthor, CreatedIssueData, FileContentData,
    DirectoryEntry, DirectoryListingData,
)
from .tools import ACTION_HANDLERS, TOOL_ID, parse_request, run_github_tool

__all__ = [
    # API client
    'GitHubAPI',
    'GitHubRequest',
    'USER_AGENT',

    # Request and payload models
    'Action',
    'GitHubToolInput',
    'GetIssueRequest',
    'CreateIssueRequest',
    'GetFileContentRequest',
    'ListDirectoryContentsRequest',
    'IssueData',
    'IssueAuthor',
    'CreatedIssueData',
    'FileContentData',
    'DirectoryEntry',
    'DirectoryListingData',

    # Dispatcher
    'ACTION_HANDLERS',
    'TOOL_ID',
    'parse_request',
    'run_github_tool',
]
