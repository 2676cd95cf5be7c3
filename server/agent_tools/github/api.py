import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ..config import DEFAULT_GITHUB_API_URL
from ..errors import GitHubAPIError, GitHubTransportError, describe_exception

logger = logging.getLogger(__name__)

USER_AGENT = "GitHub-Agent-Tools"
GITHUB_MEDIA_TYPE = "application/vnd.github.v3+json"


@dataclass(frozen=True)
class GitHubRequest:
    """One outbound call to the GitHub REST API."""
    method: str
    path: str
    noun: str
    body: Optional[Dict[str, Any]] = None


class GitHubAPI:
    """Client for the GitHub REST API (v3 media type)."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: Optional[str] = None,
        base_url: str = DEFAULT_GITHUB_API_URL,
    ):
        self.client = client
        self.token = token
        self.base_url = base_url.rstrip('/')

    def _headers(self, with_body: bool) -> Dict[str, str]:
        headers = {
            'Accept': GITHUB_MEDIA_TYPE,
            'User-Agent': USER_AGENT,
        }
        if self.token:
            headers['Authorization'] = f'token {self.token}'
        if with_body:
            headers['Content-Type'] = 'application/json'
        return headers

    async def send(self, request: GitHubRequest) -> Any:
        """Issue the request and return the decoded JSON body.

        Raises:
            GitHubTransportError: the call could not be completed or the body
                was not valid JSON.
            GitHubAPIError: GitHub answered with a non-success status.
        """
        url = f"{self.base_url}{request.path}"
        logger.debug("GitHub %s %s", request.method, url)
        try:
            response = await self.client.request(
                request.method,
                url,
                headers=self._headers(request.body is not None),
                json=request.body,
            )
        except Exception as e:
            raise GitHubTransportError(f"GitHub API error: {describe_exception(e)}") from e

        if not response.is_success:
            raise GitHubAPIError(
                f"Failed to fetch {request.noun}: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase,
            )

        try:
            return response.json()
        except ValueError as e:
            raise GitHubTransportError(f"GitHub API error: {describe_exception(e)}") from e
