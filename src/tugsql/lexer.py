"""Functions that take strings and return lists or dicts of tokens, keeping
track of where each token starts in the source."""

from __future__ import annotations

import re
from typing import TypedDict

from .context import Context, advance
from .tokens import Tag, Token


_COMMENT_MARKER = "--"

_COMMENT_RE = re.compile(r"(?P<lead>--\s*)(?P<keyword>:\S+)(?P<internalws>\s+)?(?P<rest>.*)")
_NAME_RE = re.compile(
    r"(?P<name>\S+)(?P<internalws>\s+)?(?P<keyword>:\S+)?(?P<internalws2>\s+)?(?P<rest>.+)?"
)
_RESULT_RE = re.compile(r"(?P<keyword>:\S+)(?P<rest>.+)?")


class CommentParts(TypedDict):
    keyword: Token
    rest: Token


class NameParts(TypedDict):
    name: Token
    keyword: Token
    rest: Token


class ResultParts(TypedDict):
    keyword: Token
    rest: Token


def lex(sql: str, ctx: Context) -> list[Token]:
    """Split a multi-line string into one token per line.

    A string with N line breaks yields N + 1 tokens; blank lines are kept as
    empty ``QUERY`` tokens.
    """
    tokens: list[Token] = []
    for line in sql.split("\n"):
        ctx = advance(ctx, 1)
        tokens.append(_categorize(line, ctx))
    return tokens


def _whitespace_advance(line: str, ctx: Context) -> tuple[str, Context]:
    ctx = advance(ctx, 0, len(line) - len(line.lstrip()))
    return line.strip(), ctx


def _categorize(line: str, ctx: Context) -> Token:
    line, ctx = _whitespace_advance(line, ctx)
    if line.startswith(_COMMENT_MARKER):
        return Token(Tag.COMMENT, line, ctx)
    return Token(Tag.QUERY, line, ctx)


def _rest_begin(m: re.Match[str]) -> int:
    # Width of every matched group ahead of the remainder.
    if m.group("rest") is None:
        return m.end()
    return m.start("rest")


def lex_comment(token: Token) -> CommentParts | None:
    """Split a ``-- :keyword rest`` comment into keyword and rest tokens.

    Returns None for comments that do not open with a directive.
    """
    if token.value is None:
        return None
    m = _COMMENT_RE.match(token.value)
    if m is None:
        return None

    return {
        "keyword": Token(Tag.KEYWORD, m.group("keyword"), advance(token.context, 0, len(m.group("lead")))),
        "rest": Token(Tag.SEGMENT, m.group("rest") or "", advance(token.context, 0, _rest_begin(m))),
    }


def lex_name(token: Token) -> NameParts | None:
    """Split ``name [:keyword] [rest]`` into its parts.

    Missing keyword and rest components have a None value; their contexts
    still point where they would have started.
    """
    if token.value is None:
        return None
    line, ctx = _whitespace_advance(token.value, token.context)
    m = _NAME_RE.match(line)
    if m is None:
        return None

    kwbegin = len(m.group("name")) + len(m.group("internalws") or "")
    return {
        "name": Token(Tag.NAME, m.group("name"), ctx),
        "keyword": Token(Tag.KEYWORD, m.group("keyword"), advance(ctx, 0, kwbegin)),
        "rest": Token(Tag.SEGMENT, m.group("rest"), advance(ctx, 0, _rest_begin(m))),
    }


def lex_result(token: Token) -> ResultParts | None:
    if token.value is None:
        return None
    line, ctx = _whitespace_advance(token.value, token.context)
    m = _RESULT_RE.match(line)
    if m is None:
        return None

    # rest keeps its leading whitespace
    return {
        "keyword": Token(Tag.KEYWORD, m.group("keyword"), ctx),
        "rest": Token(Tag.SEGMENT, m.group("rest"), advance(ctx, 0, len(m.group("keyword")))),
    }
