from typing import Any, List, Optional

from pydantic import BaseModel, ValidationError

from .errors import ErrorKind, ToolError


class ToolResult(BaseModel):
    """Uniform result returned by every tool invocation."""
    success: bool
    data: Optional[Any] = None
    message: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, data: Any, message: str) -> "ToolResult":
        return cls(success=True, data=data, message=message)

    @classmethod
    def failure(cls, error: ToolError, prefix: str = "") -> "ToolResult":
        return cls(
            success=False,
            data=None,
            message=f"{prefix}{error.message}",
            error_kind=error.kind,
        )


def format_validation_error(exc: ValidationError, tool_id: str) -> str:
    """Render a pydantic validation error as a single tool validation message.

    Discriminator mismatches are reported as invalid enum values, listing the
    accepted values and the one that was received.
    """
    lines: List[str] = [
        f"Tool validation failed for {tool_id}. "
        "Please fix the following errors and try again:"
    ]
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "input"
        ctx = error.get("ctx") or {}
        if error["type"] == "union_tag_invalid":
            location = ctx.get("discriminator", "action").strip("'")
            tags = str(ctx.get("expected_tags", "")).replace("'", "").split(",")
            expected = " | ".join(f"'{tag.strip()}'" for tag in tags)
            detail = f"Invalid enum value. Expected {expected}, received '{ctx.get('tag')}'"
        elif error["type"] == "literal_error":
            detail = f"Invalid enum value. Expected {ctx.get('expected')}, received '{error.get('input')}'"
        elif error["type"] == "union_tag_not_found":
            location = ctx.get("discriminator", "action").strip("'")
            detail = "Required"
        elif error["type"] == "missing":
            detail = "Required"
        else:
            detail = error["msg"]
        lines.append(f"- {location}: {detail}")
    return "\n".join(lines)
