from datetime import datetime, timedelta, timezone

from app.core.errors import GitHubAPIError, new_github_api_error_response
from app.core.translations import null_translation_helper, translation_helper
from app.mcp.results import result_text
from app.mcp.tools import ToolContext
from app.utils.time import format_timestamp


class TestFormatTimestamp:
    def test_utc(self):
        value = datetime(2024, 5, 1, 12, 34, 56, 789000, tzinfo=timezone.utc)
        assert format_timestamp(value) == "2024-05-01T12:34:56Z"

    def test_offset_converted_to_utc(self):
        value = datetime(2024, 5, 1, 1, 0, 0, tzinfo=timezone(timedelta(hours=5)))
        assert format_timestamp(value) == "2024-04-30T20:00:00Z"

    def test_naive(self):
        assert format_timestamp(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05Z"

    def test_missing(self):
        assert format_timestamp(None) == "0001-01-01T00:00:00Z"


class TestTranslations:
    def test_default(self):
        t = translation_helper({})
        assert t("TOOL_GET_USER_ACTIVITY_DESCRIPTION", "fallback") == "fallback"

    def test_env_override(self):
        t = translation_helper({"GITHUB_MCP_TOOL_GET_USER_ACTIVITY_DESCRIPTION": "custom"})
        assert t("TOOL_GET_USER_ACTIVITY_DESCRIPTION", "fallback") == "custom"

    def test_empty_override_ignored(self):
        t = translation_helper({"GITHUB_MCP_TOOL_GET_USER_ACTIVITY_DESCRIPTION": ""})
        assert t("TOOL_GET_USER_ACTIVITY_DESCRIPTION", "fallback") == "fallback"

    def test_null_helper(self):
        assert null_translation_helper("ANY", "fallback") == "fallback"


class TestGitHubAPIError:
    def test_str(self):
        error = GitHubAPIError("failed to get activity for user 'octocat'", None, RuntimeError("boom"))
        assert str(error) == "failed to get activity for user 'octocat': boom"

    def test_error_response_recorded_on_context(self):
        ctx = ToolContext()
        cause = RuntimeError("boom")

        result = new_github_api_error_response(ctx, "failed to list", None, cause)

        assert result.isError
        assert result_text(result) == "failed to list: boom"
        assert ctx.api_errors[0].err is cause
