from typing import TYPE_CHECKING, Any, Optional

from mcp.types import CallToolResult

from app.mcp.results import new_tool_result_error

if TYPE_CHECKING:
    from app.mcp.tools import ToolContext


class ToolInternalError(Exception):
    """Unexpected local failure; relayed by the server instead of a tool result."""


class ToolResultError(Exception):
    """Carries an error result's text to the MCP framework unchanged."""


class GitHubAPIError(Exception):
    def __init__(self, message: str, response: Optional[Any], err: BaseException):
        super().__init__(message)
        self.message = message
        self.response = response
        self.err = err

    def __str__(self) -> str:
        return f"{self.message}: {self.err}"


def new_github_api_error_response(
    ctx: "ToolContext",
    message: str,
    response: Optional[Any],
    err: BaseException,
) -> CallToolResult:
    api_error = GitHubAPIError(message, response, err)
    ctx.api_errors.append(api_error)
    return new_tool_result_error(str(api_error))
