"""
Tokenizer and parser for list literal text, the inverse of a list's display form.

Accepts text such as ``[1, 2.5, 'a', None]`` (brackets are optional) holding
scalar elements: integers, floats, quoted strings, True, False and None.
"""

import ast
import logging
from collections.abc import Iterator
from typing import Any

import regex as re

from lists.errors import LiteralSyntaxError

logger = logging.getLogger(__name__)

PAT = re.compile(
    r"""
    (?P<open>\[)
    | (?P<close>\])
    | (?P<comma>,)
    | (?P<space>\s+)
    | (?P<string>'(?:[^'\\\n]|\\.)*'|"(?:[^"\\\n]|\\.)*")
    | (?P<number>[+-]?(?:\d(?:_?\d)*\.\d*|\.\d+|\d(?:_?\d)*)(?:[eE][+-]?\d+)?(?![\p{L}\d_])|[+-]?inf\b|nan\b)
    | (?P<name>True|False|None)\b
    """,
    re.VERBOSE | re.UNICODE,
)

_NAMES = {"True": True, "False": False, "None": None}


def tokenize_literal(text: str) -> Iterator[tuple[str, str, int]]:
    """
    Split literal text into tokens, skipping whitespace.

    Args:
        text: Literal text to tokenize

    Returns:
        Iterator of (kind, token text, position) tuples

    Raises:
        LiteralSyntaxError: If some part of the text is not a recognised token
    """
    pos = 0
    while pos < len(text):
        match = PAT.match(text, pos)
        if match is None:
            logger.debug("Unrecognised literal token at %d in %r", pos, text)
            raise LiteralSyntaxError("unexpected character", text, pos)
        kind = match.lastgroup
        if kind != "space":
            yield kind, match.group(), pos
        pos = match.end()


def _to_value(kind: str, token: str) -> Any:
    if kind == "string":
        return ast.literal_eval(token)
    if kind == "name":
        return _NAMES[token]
    if token.lstrip("+-") in ("inf", "nan"):
        return float(token)
    if any(c in token for c in ".eE"):
        return float(token)
    return int(token)


def parse_literal(text: str) -> Iterator[Any]:
    """
    Parse list literal text into its element values, in order.

    Args:
        text: Literal text, e.g. the output of ``str(list)``

    Returns:
        Iterator of element values (use list(parse_literal(...)) to materialize)

    Raises:
        LiteralSyntaxError: If the text is not a well-formed literal
    """
    tokens = list(tokenize_literal(text))
    if not tokens:
        return

    bracketed = tokens[0][0] == "open"
    if bracketed:
        if tokens[-1][0] != "close":
            logger.debug("Unterminated list literal %r", text)
            raise LiteralSyntaxError("missing closing bracket", text, len(text))
        tokens = tokens[1:-1]

    expect_value = True
    for kind, token, pos in tokens:
        if expect_value:
            if kind not in ("string", "number", "name"):
                raise LiteralSyntaxError(f"expected a value, found {token!r}", text, pos)
            try:
                value = _to_value(kind, token)
            except (SyntaxError, ValueError) as exc:
                logger.debug("Cannot convert literal token %r at %d: %s", token, pos, exc)
                raise LiteralSyntaxError(f"invalid {kind} {token!r}", text, pos) from exc
            yield value
        elif kind != "comma":
            raise LiteralSyntaxError(f"expected ',', found {token!r}", text, pos)
        expect_value = not expect_value

    # Trailing comma, or a comma with nothing before it
    if tokens and expect_value:
        raise LiteralSyntaxError("dangling ','", text, tokens[-1][2])
