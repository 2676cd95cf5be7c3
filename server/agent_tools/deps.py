from __future__ import annotations

from dataclasses import dataclass

import httpx

from .config import DEFAULT_GITHUB_API_URL, Settings


@dataclass
class AgentDeps:
    """Dependencies handed to every tool through the agent run context."""
    client: httpx.AsyncClient
    github_token: str | None = None
    github_api_url: str = DEFAULT_GITHUB_API_URL

    @classmethod
    def from_settings(cls, client: httpx.AsyncClient, settings: Settings) -> AgentDeps:
        return cls(
            client=client,
            github_token=settings.github_token,
            github_api_url=settings.github_api_url,
        )
