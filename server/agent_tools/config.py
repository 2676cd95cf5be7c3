"""Process configuration, resolved once at startup."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_AGENT_MODEL = "gpt-4o-mini"


def _env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    return value if value else default


@dataclass(frozen=True)
class Settings:
    github_token: str | None = None
    github_api_url: str = DEFAULT_GITHUB_API_URL
    openai_api_key: str | None = None
    openai_proxy_url: str | None = None
    agent_model: str = DEFAULT_AGENT_MODEL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> Settings:
        """Build settings from the environment, loading a .env file first."""
        if dotenv:
            load_dotenv()
        return cls(
            github_token=_env("GITHUB_TOKEN"),
            github_api_url=_env("GITHUB_API_URL", DEFAULT_GITHUB_API_URL).rstrip("/"),
            openai_api_key=_env("OPENAI_API_KEY"),
            openai_proxy_url=_env("OPENAI_PROXY_URL"),
            agent_model=_env("AGENT_MODEL", DEFAULT_AGENT_MODEL),
            log_level=_env("LOG_LEVEL", "INFO").upper(),
        )

    def __repr__(self) -> str:
        token = "set" if self.github_token else "unset"
        api_key = "set" if self.openai_api_key else "unset"
        return (
            f"Settings(github_token={token}, github_api_url={self.github_api_url!r}, "
            f"openai_api_key={api_key}, openai_proxy_url={self.openai_proxy_url!r}, "
            f"agent_model={self.agent_model!r}, log_level={self.log_level!r})"
        )
