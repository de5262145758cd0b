from mcp.types import CallToolResult, TextContent


def new_tool_result_text(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)])


def new_tool_result_error(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=True)


def result_text(result: CallToolResult) -> str:
    return "".join(
        block.text for block in result.content if isinstance(block, TextContent)
    )
