"""Argument extraction for MCP tool calls."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 30


class ParamError(ValueError):
    pass


@dataclass
class PaginationParams:
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE


def _type_name(value: Any) -> str:
    return type(value).__name__


def required_str_param(arguments: Mapping[str, Any], name: str) -> str:
    if name not in arguments or arguments[name] is None:
        raise ParamError(f"missing required parameter: {name}")
    value = arguments[name]
    if not isinstance(value, str):
        raise ParamError(f"parameter {name} is not of type string, is {_type_name(value)}")
    if value == "":
        raise ParamError(f"missing required parameter: {name}")
    return value


def optional_int_param(arguments: Mapping[str, Any], name: str, default: int) -> int:
    value = arguments.get(name)
    if value is None:
        return default
    # JSON numbers arrive as int or float; bool is an int subclass but not a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParamError(f"parameter {name} is not of type number, is {_type_name(value)}")
    return int(value)


def optional_pagination_params(arguments: Mapping[str, Any]) -> PaginationParams:
    return PaginationParams(
        page=optional_int_param(arguments, "page", DEFAULT_PAGE),
        per_page=optional_int_param(arguments, "perPage", DEFAULT_PER_PAGE),
    )


def with_pagination() -> Dict[str, Dict[str, Any]]:
    """Input schema properties shared by every paginated tool."""
    return {
        "page": {
            "type": "number",
            "description": "Page number for pagination (min 1)",
            "minimum": 1,
        },
        "perPage": {
            "type": "number",
            "description": "Results per page for pagination (min 1, max 100)",
            "minimum": 1,
            "maximum": 100,
        },
    }
