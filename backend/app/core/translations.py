import os
from typing import Callable, Mapping, Optional

from app.core.config import TRANSLATION_ENV_PREFIX

TranslationHelper = Callable[[str, str], str]


def translation_helper(environ: Optional[Mapping[str, str]] = None) -> TranslationHelper:
    """
    Build a lookup for user-facing tool strings.

    Each key can be overridden with an environment variable named
    ``GITHUB_MCP_<KEY>``; otherwise the built-in default is returned.
    """
    env = os.environ if environ is None else environ

    def t(key: str, default: str) -> str:
        return env.get(f"{TRANSLATION_ENV_PREFIX}{key.upper()}") or default

    return t


def null_translation_helper(_key: str, default: str) -> str:
    return default
