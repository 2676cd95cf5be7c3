import logging
from typing import Any, AsyncIterator, Dict, Optional

import httpx
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from agent_tools import AgentDeps, Settings, ToolResult, read_pdf, run_github_tool, web_search
from cv_agent import get_cv_agent
from github_agent import get_github_agent

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(title="Agent Tools API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup():
    settings = Settings.from_env()
    logging.getLogger().setLevel(settings.log_level)
    app.state.settings = settings
    logger.info("Loaded %r", settings)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient() as client:
        yield client


class AgentRequest(BaseModel):
    """Request model for the agent endpoints."""
    model_config = ConfigDict(populate_by_name=True)

    query: str
    sessionId: str = Field(alias="session_id")
    requestId: str = Field(alias="request_id")


class AgentResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None


AGENTS = {
    "github-agent": get_github_agent,
    "cv-agent": get_cv_agent,
}


async def _run_agent(name: str, request: AgentRequest, settings: Settings, client: httpx.AsyncClient) -> AgentResponse:
    try:
        logger.info("Received %s request %s (session %s)", name, request.requestId, request.sessionId)
        agent = AGENTS[name](settings)
        deps = AgentDeps.from_settings(client, settings)

        logger.debug("Running %s with query: %s", name, request.query)
        result = await agent.run(request.query, deps=deps)
        logger.debug("Agent result: %s", result)

        return AgentResponse(success=True, message=result.output)
    except Exception as e:
        logger.error(f"Error processing {name} request: {str(e)}", exc_info=True)
        error_msg = "I apologize, but I encountered an error processing your request."
        return AgentResponse(success=False, error=str(e), message=error_msg)


@app.post("/api/github-agent", response_model=AgentResponse)
async def github_agent_endpoint(
    request: AgentRequest,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    return await _run_agent("github-agent", request, settings, client)


@app.post("/api/cv-agent", response_model=AgentResponse)
async def cv_agent_endpoint(
    request: AgentRequest,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    return await _run_agent("cv-agent", request, settings, client)


@app.post("/api/tools/{tool_name}", response_model=ToolResult)
async def tool_endpoint(
    tool_name: str,
    payload: Dict[str, Any],
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    """Invoke a tool directly with its raw input."""
    deps = AgentDeps.from_settings(client, settings)
    if tool_name == "github":
        return await run_github_tool(deps, payload)
    if tool_name == "pdf":
        return await read_pdf(deps, payload)
    if tool_name == "search":
        return web_search(payload)
    raise HTTPException(status_code=404, detail=f"Unknown tool: {tool_name}")


@app.get("/health")
async def health_check():
    """Health check endpoint to verify the server is running."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    logger.info("Starting FastAPI server on http://127.0.0.1:8000")
    uvicorn.run(app, host="127.0.0.1", port=8000, log_level="info")
