"""MCP tool definitions for GitHub user activity."""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Protocol, Tuple

import httpx
from mcp.types import CallToolResult, Tool, ToolAnnotations
from pydantic_core import PydanticSerializationError

from app.core.errors import (
    GitHubAPIError,
    ToolInternalError,
    new_github_api_error_response,
)
from app.core.translations import TranslationHelper
from app.mcp.params import (
    ParamError,
    optional_pagination_params,
    required_str_param,
    with_pagination,
)
from app.mcp.results import new_tool_result_error, new_tool_result_text
from app.schemas.github import (
    MinimalEvent,
    MinimalRepo,
    MinimalUser,
    RemoteEvent,
    dump_minimal_events,
)
from app.services.github_client import GitHubClientError, ListOptions
from app.utils.time import format_timestamp


@dataclass
class ToolContext:
    """Per-call state handed to tool handlers and client providers."""

    request_id: Optional[str] = None
    api_errors: List[GitHubAPIError] = field(default_factory=list)


class ActivityClient(Protocol):
    async def list_events_performed_by_user(
        self, username: str, public_only: bool, opts: Optional[ListOptions] = None
    ) -> Tuple[List[RemoteEvent], Any]: ...


GetClientFn = Callable[[ToolContext], Awaitable[ActivityClient]]
ToolHandler = Callable[[ToolContext, Dict[str, Any]], Awaitable[CallToolResult]]


@dataclass
class ToolDefinition:
    tool: Tool
    handler: ToolHandler


def to_minimal_event(event: RemoteEvent) -> MinimalEvent:
    actor = event.actor
    repo = event.repo
    return MinimalEvent(
        id=event.id,
        type=event.type,
        actor=MinimalUser(
            login=actor.login if actor else "",
            id=actor.id if actor else 0,
            avatar_url=actor.avatar_url if actor else "",
            profile_url=actor.url if actor else "",
        ),
        repo=MinimalRepo(
            id=repo.id if repo else 0,
            name=repo.name if repo else "",
            url=repo.url if repo else "",
        ),
        created_at=format_timestamp(event.created_at),
        payload=event.raw_payload,
    )


def get_user_activity(get_client: GetClientFn, t: TranslationHelper) -> ToolDefinition:
    """
    Build the ``get_user_activity`` tool.

    The handler fetches one page of public events performed by a user and
    returns them as a JSON array of minimal events. Each event keeps its id,
    type, actor, repo and creation time; the event payload is passed through
    untouched and left out entirely when the event has none.

    Bad arguments, API failures and non-200 responses come back as error
    results. A client provider failure or an unserializable response raises
    ToolInternalError.
    """
    tool = Tool(
        name="get_user_activity",
        description=t(
            "TOOL_GET_USER_ACTIVITY_DESCRIPTION",
            "Get recent activity for a GitHub user. Returns a list of events performed by the user.",
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "username": {
                    "type": "string",
                    "description": "The GitHub username to get activity for.",
                },
                **with_pagination(),
            },
            "required": ["username"],
        },
        annotations=ToolAnnotations(
            title=t("TOOL_GET_USER_ACTIVITY_USER_TITLE", "Get user activity"),
            readOnlyHint=True,
        ),
    )

    async def handler(ctx: ToolContext, arguments: Dict[str, Any]) -> CallToolResult:
        try:
            username = required_str_param(arguments, "username")
            pagination = optional_pagination_params(arguments)
        except ParamError as exc:
            return new_tool_result_error(str(exc))

        opts = ListOptions(page=pagination.page, per_page=pagination.per_page)

        try:
            client = await get_client(ctx)
        except Exception as exc:
            raise ToolInternalError(f"failed to get GitHub client: {exc}") from exc

        try:
            events, response = await client.list_events_performed_by_user(
                username, True, opts
            )
        except GitHubClientError as exc:
            return new_github_api_error_response(
                ctx,
                f"failed to get activity for user '{username}'",
                exc.response,
                exc,
            )

        try:
            if response.status_code != 200:
                try:
                    body = await response.aread()
                except (httpx.HTTPError, httpx.StreamError) as exc:
                    raise ToolInternalError(f"failed to read response body: {exc}") from exc
                return new_tool_result_error(body.decode("utf-8", errors="replace"))

            minimal_events = [to_minimal_event(event) for event in events]
            try:
                data = dump_minimal_events(minimal_events)
            except PydanticSerializationError as exc:
                raise ToolInternalError(f"failed to marshal response: {exc}") from exc
            return new_tool_result_text(data)
        finally:
            await response.aclose()

    return ToolDefinition(tool=tool, handler=handler)


# Registry of tool factories, keyed by tool name
TOOLS = {
    "get_user_activity": get_user_activity,
}
