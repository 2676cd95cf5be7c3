import base64
import binascii
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError

from ..deps import AgentDeps
from ..errors import ToolError, ToolValidationError
from ..results import ToolResult, format_validation_error
from .api import GitHubAPI, GitHubRequest
from .types import (
    Action, CreateIssueRequest, GetFileContentRequest, GetIssueRequest,
    GitHubToolInput, ListDirectoryContentsRequest,
    CreatedIssueData, DirectoryEntry, DirectoryListingData,
    FileContentData, IssueAuthor, IssueData,
)

logger = logging.getLogger(__name__)

TOOL_ID = "github-operations"

_input_adapter = TypeAdapter(GitHubToolInput)


@dataclass(frozen=True)
class ActionHandler:
    """How one action is validated, sent to GitHub and shaped for the caller."""
    validate: Callable[[Any], None]
    build_request: Callable[[Any], GitHubRequest]
    normalize: Callable[[Any, Any], ToolResult]


def _repo_path(request) -> str:
    return f"/repos/{quote(request.owner, safe='')}/{quote(request.repo, safe='')}"


def _contents_path(request) -> str:
    path = (request.file_path or '').lstrip('/')
    return f"{_repo_path(request)}/contents/{quote(path, safe='/')}"


# get_issue

def _validate_get_issue(request: GetIssueRequest) -> None:
    if not request.issue_number:
        raise ToolValidationError("Issue number is required")


def _build_get_issue(request: GetIssueRequest) -> GitHubRequest:
    return GitHubRequest('GET', f"{_repo_path(request)}/issues/{request.issue_number}", noun='issue')


def _label_name(label: Any) -> str:
    if isinstance(label, Mapping):
        return label.get('name', '')
    return str(label)


def _normalize_get_issue(request: GetIssueRequest, issue: Any) -> ToolResult:
    if not isinstance(issue, Mapping):
        raise ToolValidationError(
            f"Tool validation failed for {TOOL_ID}: expected an issue object from GitHub"
        )
    user = issue.get('user') or {}
    if not isinstance(user, Mapping):
        raise ToolValidationError(
            f"Tool validation failed for {TOOL_ID}: expected the issue author to be an object"
        )
    data = IssueData(
        number=issue['number'],
        title=issue['title'],
        body=issue.get('body'),
        state=issue['state'],
        created_at=issue['created_at'],
        updated_at=issue['updated_at'],
        author=IssueAuthor(login=user.get('login'), avatar_url=user.get('avatar_url')),
        labels=[_label_name(label) for label in issue.get('labels') or []],
        url=issue['html_url'],
    )
    return ToolResult.ok(data, "Issue retrieved successfully")


# create_issue

def _validate_create_issue(request: CreateIssueRequest) -> None:
    if not request.title or not request.body:
        raise ToolValidationError("Title and body are required")


def _build_create_issue(request: CreateIssueRequest) -> GitHubRequest:
    # Failures reuse the read wording ("Failed to fetch issue").
    return GitHubRequest(
        'POST',
        f"{_repo_path(request)}/issues",
        noun='issue',
        body={'title': request.title, 'body': request.body},
    )


def _normalize_create_issue(request: CreateIssueRequest, issue: Any) -> ToolResult:
    if not isinstance(issue, Mapping):
        raise ToolValidationError(
            f"Tool validation failed for {TOOL_ID}: expected an issue object from GitHub"
        )
    data = CreatedIssueData(issue_number=issue['number'], issue_url=issue['html_url'])
    return ToolResult.ok(data, "Issue created successfully")


# get_file_content

def _validate_get_file_content(request: GetFileContentRequest) -> None:
    if not request.file_path:
        raise ToolValidationError("File path is required")


def _build_get_file_content(request: GetFileContentRequest) -> GitHubRequest:
    return GitHubRequest('GET', _contents_path(request), noun='file')


def decode_content(encoded: str) -> str:
    """Decode a base64 ``content`` field from the contents API.

    GitHub wraps the encoded payload at 60 columns; the line breaks are
    discarded by the decoder. Bytes that are not valid UTF-8 are replaced.
    """
    try:
        raw = base64.b64decode(encoded or '')
    except (binascii.Error, ValueError) as e:
        raise ToolValidationError(f"File content could not be decoded: {e}") from e
    return raw.decode('utf-8', errors='replace')


def _normalize_get_file_content(request: GetFileContentRequest, payload: Any) -> ToolResult:
    if not isinstance(payload, Mapping) or payload.get('type') != 'file':
        raise ToolValidationError("Path does not point to a file")
    data = FileContentData(
        content=decode_content(payload.get('content', '')),
        path=request.file_path,
        size=payload.get('size'),
        sha=payload.get('sha'),
        download_url=payload.get('download_url'),
    )
    return ToolResult.ok(data, "File content retrieved successfully")


# list_directory_contents

def _validate_list_directory(request: ListDirectoryContentsRequest) -> None:
    """A missing path lists the repository root."""


def _build_list_directory(request: ListDirectoryContentsRequest) -> GitHubRequest:
    return GitHubRequest('GET', _contents_path(request), noun='directory')


def _normalize_list_directory(request: ListDirectoryContentsRequest, payload: Any) -> ToolResult:
    if not isinstance(payload, list):
        raise ToolValidationError("Path does not point to a directory")
    contents = [
        DirectoryEntry(
            name=entry['name'],
            path=entry['path'],
            type=entry['type'],
            size=entry.get('size'),
            download_url=entry.get('download_url'),
        )
        for entry in payload
    ]
    data = DirectoryListingData(path=request.file_path or '/', contents=contents)
    return ToolResult.ok(data, "Directory contents retrieved successfully")


ACTION_HANDLERS: Dict[Action, ActionHandler] = {
    Action.GET_ISSUE: ActionHandler(_validate_get_issue, _build_get_issue, _normalize_get_issue),
    Action.CREATE_ISSUE: ActionHandler(_validate_create_issue, _build_create_issue, _normalize_create_issue),
    Action.GET_FILE_CONTENT: ActionHandler(
        _validate_get_file_content, _build_get_file_content, _normalize_get_file_content
    ),
    Action.LIST_DIRECTORY_CONTENTS: ActionHandler(
        _validate_list_directory, _build_list_directory, _normalize_list_directory
    ),
}


def parse_request(payload: Mapping[str, Any]):
    """Validate raw tool input against the request schema."""
    try:
        return _input_adapter.validate_python(dict(payload))
    except ValidationError as e:
        raise ToolValidationError(format_validation_error(e, TOOL_ID)) from e


async def run_github_tool(deps: AgentDeps, payload: Mapping[str, Any]) -> ToolResult:
    """Run one GitHub operation and return its result.

    Exactly one request is sent to GitHub, and only once the input has been
    validated. Every failure is returned as an unsuccessful ``ToolResult``.
    """
    try:
        request = parse_request(payload)
        handler = ACTION_HANDLERS[Action(request.action)]
        handler.validate(request)
        logger.debug("github tool: %s on %s/%s", request.action, request.owner, request.repo)

        api = GitHubAPI(deps.client, deps.github_token, deps.github_api_url)
        raw = await api.send(handler.build_request(request))
        try:
            return handler.normalize(request, raw)
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            raise ToolValidationError(
                f"Tool validation failed for {TOOL_ID}: unexpected response from GitHub ({e!r})"
            ) from e
    except ToolError as e:
        if not isinstance(e, ToolValidationError):
            logger.warning("github tool failed: %s", e.message)
        return ToolResult.failure(e)
