"""
Best-effort conversion of a script object literal into a Python dict.

Only flat literals such as ``{enterpriseId: 'acme', retries: 3, enabled: true}``
are supported: bare or quoted keys, single- or double-quoted strings, numbers,
booleans and null. Trailing commas, comments, computed keys, template strings
and any non-literal value (identifiers, calls, arithmetic) are rejected with
LiteralParseError. Nested objects and arrays are not supported either, even
though simple ones may happen to convert. Nothing here evaluates script code.
"""
import json
import re
from typing import Any, Dict, List, Tuple

_TOKEN = re.compile(
    r"""
      (?P<dq>"(?:[^"\\\n]|\\.)*")
    | (?P<sq>'(?:[^'\\\n]|\\.)*')
    | (?P<num>-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)
    | (?P<ident>[A-Za-z_$][\w$]*)
    | (?P<punct>[{}\[\]:,])
    """,
    re.VERBOSE,
)
_WHITESPACE = re.compile(r"\s*")
_SINGLE_QUOTED_PART = re.compile(r"""\\(.)|(")""")
_JSON_KEYWORDS = {"true", "false", "null"}


class LiteralParseError(ValueError):
    """The literal uses syntax outside the supported subset."""


def _tokenize(text: str) -> List[Tuple[str, str]]:
    tokens = []
    pos = 0
    while True:
        pos = _WHITESPACE.match(text, pos).end()
        if pos >= len(text):
            return tokens
        match = _TOKEN.match(text, pos)
        if not match:
            raise LiteralParseError(f"Unsupported syntax at offset {pos}: {text[pos:pos + 20]!r}")
        tokens.append((match.lastgroup, match.group()))
        pos = match.end()


def _single_to_double_quoted(raw: str) -> str:
    def _swap(match):
        if match.group(2):
            return '\\"'
        escaped = match.group(1)
        return "'" if escaped == "'" else "\\" + escaped

    return '"' + _SINGLE_QUOTED_PART.sub(_swap, raw[1:-1]) + '"'


def to_json_text(literal: str) -> str:
    """Rewrites a supported script object literal as JSON text."""
    tokens = _tokenize(literal)
    parts = []
    for index, (kind, value) in enumerate(tokens):
        is_key = index + 1 < len(tokens) and tokens[index + 1] == ("punct", ":")
        if kind == "sq":
            parts.append(_single_to_double_quoted(value))
        elif kind == "ident":
            if is_key:
                parts.append(json.dumps(value))
            elif value in _JSON_KEYWORDS:
                parts.append(value)
            else:
                raise LiteralParseError(f"Unsupported non-literal value: {value}")
        else:
            parts.append(value)
    return "".join(parts)


def parse_object_literal(literal: str) -> Dict[str, Any]:
    """Parses a supported script object literal into a dict."""
    try:
        data = json.loads(to_json_text(literal))
    except json.JSONDecodeError as e:
        raise LiteralParseError(f"Literal is not valid once normalised: {e}") from e
    if not isinstance(data, dict):
        raise LiteralParseError(f"Expected an object literal, got {type(data).__name__}")
    return data
