import logging

import logfire
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider

from .config import Settings

logger = logging.getLogger(__name__)

_logfire_configured = False


def configure_logfire() -> None:
    """Send traces to Logfire only when a Logfire token is configured."""
    global _logfire_configured
    if not _logfire_configured:
        logfire.configure(send_to_logfire='if-token-present')
        _logfire_configured = True


def build_model(settings: Settings) -> OpenAIChatModel:
    """OpenAI chat model, routed through OPENAI_PROXY_URL when it is set."""
    configure_logfire()
    if settings.openai_proxy_url:
        logger.info("Using proxy: %s", settings.openai_proxy_url)
        provider = OpenAIProvider(base_url=settings.openai_proxy_url, api_key=settings.openai_api_key)
    else:
        logger.info("Using direct OpenAI connection")
        provider = OpenAIProvider(api_key=settings.openai_api_key)
    return OpenAIChatModel(settings.agent_model, provider=provider)
