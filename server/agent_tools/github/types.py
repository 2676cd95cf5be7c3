from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class Action(str, Enum):
    GET_ISSUE = "get_issue"
    CREATE_ISSUE = "create_issue"
    GET_FILE_CONTENT = "get_file_content"
    LIST_DIRECTORY_CONTENTS = "list_directory_contents"


class _RepoRequest(BaseModel):
    """Fields shared by every GitHub tool request."""
    owner: str = Field(min_length=1, description="Repository owner (user or organization)")
    repo: str = Field(min_length=1, description="Repository name")


class GetIssueRequest(_RepoRequest):
    action: Literal["get_issue"]
    issue_number: Optional[int] = Field(default=None, gt=0)


class CreateIssueRequest(_RepoRequest):
    action: Literal["create_issue"]
    title: Optional[str] = None
    body: Optional[str] = None


class GetFileContentRequest(_RepoRequest):
    action: Literal["get_file_content"]
    file_path: Optional[str] = None


class ListDirectoryContentsRequest(_RepoRequest):
    action: Literal["list_directory_contents"]
    file_path: Optional[str] = Field(default=None, description="Directory path, empty for the repository root")


GitHubToolInput = Annotated[
    Union[GetIssueRequest, CreateIssueRequest, GetFileContentRequest, ListDirectoryContentsRequest],
    Field(discriminator="action"),
]


class IssueAuthor(BaseModel):
    login: Optional[str] = None
    avatar_url: Optional[str] = None


class IssueData(BaseModel):
    """An issue as returned to the agent."""
    number: int
    title: str
    body: Optional[str] = None
    state: str
    created_at: str
    updated_at: str
    author: IssueAuthor
    labels: List[str]
    url: str


class CreatedIssueData(BaseModel):
    issue_number: int
    issue_url: str


class FileContentData(BaseModel):
    content: str
    path: str
    size: Optional[int] = None
    sha: Optional[str] = None
    download_url: Optional[str] = None


class DirectoryEntry(BaseModel):
    name: str
    path: str
    type: str
    size: Optional[int] = None
    download_url: Optional[str] = None


class DirectoryListingData(BaseModel):
    path: str
    contents: List[DirectoryEntry]
