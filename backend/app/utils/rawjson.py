import json
import re
from typing import List, Optional, Tuple

_decoder = json.JSONDecoder()
_WHITESPACE = re.compile(r"[ \t\n\r]*")


def _skip(text: str, idx: int) -> int:
    return _WHITESPACE.match(text, idx).end()


def _expect(text: str, idx: int, char: str) -> int:
    if idx >= len(text) or text[idx] != char:
        raise ValueError(f"expected {char!r} at position {idx}")
    return idx + 1


def _raw_member(text: str, idx: int, name: str) -> Tuple[Optional[str], int]:
    """Return the raw text of member ``name`` of the value at ``idx`` and its end."""
    if text[idx:idx + 1] != "{":
        _, end = _decoder.raw_decode(text, idx)
        return None, end

    raw = None
    idx = _skip(text, idx + 1)
    if text[idx:idx + 1] == "}":
        return None, idx + 1
    while True:
        key, idx = _decoder.raw_decode(text, idx)
        idx = _skip(text, _expect(text, _skip(text, idx), ":"))
        _, end = _decoder.raw_decode(text, idx)
        # last occurrence wins, as with json.loads
        if key == name:
            raw = text[idx:end]
        idx = _skip(text, end)
        if text[idx:idx + 1] == "}":
            return raw, idx + 1
        idx = _skip(text, _expect(text, idx, ","))


def raw_member_values(text: str, name: str) -> List[Optional[str]]:
    """
    Raw JSON text of member ``name`` for each element of a top-level array.

    The text is sliced from the document unchanged, so number spelling,
    escapes and whitespace survive. Elements without the member, or where it
    is ``null``, give None.
    """
    values: List[Optional[str]] = []
    idx = _expect(text, _skip(text, 0), "[")
    idx = _skip(text, idx)
    if text[idx:idx + 1] == "]":
        return values
    while True:
        raw, idx = _raw_member(text, idx, name)
        values.append(None if raw == "null" else raw)
        idx = _skip(text, idx)
        if text[idx:idx + 1] == "]":
            return values
        idx = _skip(text, _expect(text, idx, ","))
