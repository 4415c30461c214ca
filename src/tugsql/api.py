from __future__ import annotations

import logging
from pathlib import Path

from .context import Context
from .errors import LexError
from .lexer import lex
from .tokens import Token


logger = logging.getLogger(__name__)


def lex_source(sql: str, *, sqlfile: str = "<literal>") -> list[Token]:
    return lex(sql, Context(sqlfile))


def lex_file(path: str | Path) -> list[Token]:
    p = Path(path).expanduser().resolve()
    ctx = Context(str(p))
    if not p.exists():
        raise LexError(ctx, "file not found", hint="check the path passed in")
    if not p.is_file():
        raise LexError(ctx, "not a regular file")
    try:
        sql = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise LexError(ctx, f"cannot decode as utf-8: {e.reason}", hint="re-save the file as utf-8") from e

    tokens = lex(sql, ctx)
    logger.debug("lexed %s into %d tokens", p, len(tokens))
    return tokens
