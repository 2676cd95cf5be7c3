from __future__ import annotations

from functools import lru_cache

from pydantic_ai import Agent, RunContext
from pydantic_ai.models import Model

from agent_tools import AgentDeps, Settings, ToolResult, read_pdf, web_search
from agent_tools.llm import build_model

system_prompt = """
You are a helpful CV (curriculum vitae) assistant that can read, analyze, and search through resume documents. You can:

1. Read PDF CVs from URLs - extract and analyze the content of PDF documents
2. Summarize CV content - give a one paragraph summary of qualifications, experience, and skills. No lists.
3. Search the web for candidates - look for additional information about a candidate with the web search tool

Be professional and concise. Use web search to find candidate information on LinkedIn, GitHub,
Stack Overflow and other professional platforms. Do not store or repeat CV content beyond what the
user asks for.
"""


def create_cv_agent(settings: Settings, model: Model | None = None) -> Agent[AgentDeps, str]:
    agent = Agent(
        model or build_model(settings),
        system_prompt=system_prompt,
        deps_type=AgentDeps,
        retries=2,
    )

    @agent.tool
    async def read_pdf_from_url(ctx: RunContext[AgentDeps], url: str) -> ToolResult:
        """Read and extract the text of a PDF file.

        Args:
            ctx: The context containing dependencies.
            url: URL of the PDF file to read.
        """
        return await read_pdf(ctx.deps, {'action': 'read_pdf', 'url': url})

    @agent.tool_plain
    def search_web(query: str, base_url: str | None = None) -> ToolResult:
        """Search the web for candidate information across professional platforms.

        Args:
            query: Search query or keywords.
            base_url: Optional custom base URL for search (defaults to Google).
        """
        payload = {'query': query}
        if base_url:
            payload['base_url'] = base_url
        return web_search(payload)

    return agent


@lru_cache(maxsize=None)
def get_cv_agent(settings: Settings) -> Agent[AgentDeps, str]:
    return create_cv_agent(settings)
