"""
Result shapes returned by tool and resource handlers.

Tools answer with a ToolResult whose ``is_error`` flag tells the caller
whether the call failed. Resources answer with a ResourceDocument: a failure
is still a document, told apart only by its plain-text mime type.
"""

import logging
from dataclasses import dataclass
from functools import wraps
from typing import Awaitable, Callable

from mcp.types import CallToolResult, TextContent

logger = logging.getLogger(__name__)

MARKDOWN = "text/markdown"
PLAIN_TEXT = "text/plain"


@dataclass(frozen=True)
class ToolResult:
    """The {text, isError} envelope returned by every tool"""

    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(text=f"Error: {message}", is_error=True)

    def to_call_tool_result(self) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=self.text)],
            isError=self.is_error
        )


@dataclass(frozen=True)
class ResourceDocument:
    """A fetched resource body"""

    text: str
    mime_type: str = PLAIN_TEXT


def tool_handler(func: Callable[..., Awaitable[str]]) -> Callable[..., Awaitable[ToolResult]]:
    """
    Wrap a handler body that returns formatted text.

    Any exception raised along the way, including one after some calls have
    already succeeded, becomes a failed ToolResult and no partial text is kept.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs) -> ToolResult:
        try:
            text = await func(*args, **kwargs)
        except Exception as e:
            logger.warning(f"{func.__name__} failed: {e}")
            return ToolResult.failure(str(e))
        return ToolResult.ok(text)

    return wrapper
