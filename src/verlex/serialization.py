"""Token serialization: JSON round-trip for verlex tokens.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Feeding token streams to tools written in other languages
- Snapshotting scanner output in tests
- Debugging and inspection (``verlex --json``)

All output is deterministic (sorted keys).

Example:
    from verlex import scan_all
    from verlex.serialization import to_json, from_json

    tokens = scan_all("pkg >= 1.0")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from verlex.tokens import Token, TokenKind


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    The source file is left out; it belongs to the whole stream, not to
    each token.
    """
    return {
        "kind": token.kind.name,
        "value": token.value,
        "lineno": token.lineno,
        "col": token.col,
    }


def from_dict(data: dict[str, Any], *, source_file: str | None = None) -> Token:
    """Rebuild a token from ``to_dict`` output.

    Raises:
        ValueError: If ``kind`` does not name a TokenKind, or ``value``
            is missing.
    """
    try:
        kind = TokenKind[data["kind"]]
    except KeyError:
        raise ValueError(f"Unknown token kind: {data.get('kind')!r}") from None
    if "value" not in data:
        raise ValueError(f"Token dict has no value: {data!r}")
    return Token(
        kind=kind,
        value=data["value"],
        lineno=data.get("lineno", 0),
        col=data.get("col", 0),
        source_file=source_file,
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array string."""
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(json_str: str, *, source_file: str | None = None) -> list[Token]:
    """Deserialize a JSON array string to a list of tokens."""
    return [from_dict(item, source_file=source_file) for item in json.loads(json_str)]


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
