import os

GITHUB_TOKEN = os.environ.get(
    "GITHUB_PERSONAL_ACCESS_TOKEN", os.environ.get("GITHUB_TOKEN", "")
)
GITHUB_API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com")
GITHUB_HTTP_TIMEOUT = float(os.environ.get("GITHUB_HTTP_TIMEOUT", "20"))
GITHUB_HTTP_CONNECT_TIMEOUT = float(os.environ.get("GITHUB_HTTP_CONNECT_TIMEOUT", "10"))
GITHUB_USER_AGENT = os.environ.get("GITHUB_USER_AGENT", "github-activity-mcp")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Prefix for description/title overrides, e.g. GITHUB_MCP_TOOL_GET_USER_ACTIVITY_DESCRIPTION
TRANSLATION_ENV_PREFIX = "GITHUB_MCP_"
