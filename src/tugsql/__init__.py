from __future__ import annotations

from .api import lex_file, lex_source
from .context import Context, advance
from .errors import LexError
from .lexer import CommentParts, NameParts, ResultParts, lex, lex_comment, lex_name, lex_result
from .tokens import Tag, Token

__all__ = [
    "CommentParts",
    "Context",
    "LexError",
    "NameParts",
    "ResultParts",
    "Tag",
    "Token",
    "advance",
    "lex",
    "lex_comment",
    "lex_file",
    "lex_name",
    "lex_result",
    "lex_source",
]
