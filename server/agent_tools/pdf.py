"""PDF text extraction tool."""

import asyncio
import io
import logging
from typing import Any, Literal, Mapping, Optional, Tuple

from pydantic import BaseModel, HttpUrl, ValidationError
from pypdf import PdfReader

from .deps import AgentDeps
from .errors import ApiError, ToolError, ToolValidationError, TransportError, describe_exception
from .results import ToolResult, format_validation_error

logger = logging.getLogger(__name__)

TOOL_ID = "pdf-operations"
ERROR_PREFIX = "PDF processing error: "


class ReadPdfRequest(BaseModel):
    action: Literal["read_pdf"]
    url: HttpUrl


class PdfMetadata(BaseModel):
    pages: Optional[int] = None
    size: Optional[int] = None


class PdfData(BaseModel):
    text: str
    url: str
    metadata: Optional[PdfMetadata] = None


def extract_text(content: bytes) -> Tuple[str, int]:
    """Extract the text and page count of a PDF document."""
    reader = PdfReader(io.BytesIO(content))
    text = "\n".join(page.extract_text() or "" for page in reader.pages)
    return text, len(reader.pages)


async def _download(deps: AgentDeps, url: str) -> bytes:
    try:
        response = await deps.client.get(url, follow_redirects=True)
    except Exception as e:
        raise TransportError(describe_exception(e)) from e

    if not response.is_success:
        raise ApiError(
            f"Failed to fetch PDF: {response.status_code} {response.reason_phrase}",
            status_code=response.status_code,
            reason=response.reason_phrase,
        )

    content_type = response.headers.get("content-type", "")
    if "application/pdf" not in content_type:
        raise ToolValidationError("URL does not point to a PDF file")
    return response.content


async def read_pdf(deps: AgentDeps, payload: Mapping[str, Any]) -> ToolResult:
    """Download a PDF and return its text.

    Parsing runs in a worker thread so the event loop is not blocked.
    """
    try:
        request = ReadPdfRequest.model_validate(dict(payload))
    except ValidationError as e:
        return ToolResult.failure(ToolValidationError(format_validation_error(e, TOOL_ID)))

    try:
        url = str(request.url)
        content = await _download(deps, url)
        try:
            text, pages = await asyncio.to_thread(extract_text, content)
        except Exception as e:
            raise ToolValidationError(describe_exception(e)) from e

        logger.debug("Extracted %d pages from %s", pages, url)
        data = PdfData(text=text, url=url, metadata=PdfMetadata(pages=pages, size=len(content)))
        return ToolResult.ok(data, "PDF content extracted successfully")
    except ToolError as e:
        logger.warning("pdf tool failed: %s", e.message)
        return ToolResult.failure(e, prefix=ERROR_PREFIX)
