from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict

from .api import lex_file
from .errors import LexError
from .lexer import lex_comment
from .tokens import Token


def _to_jsonable(tok: Token) -> dict:
    d = asdict(tok)
    d["tag"] = tok.tag.value
    return d


def _format_token(tok: Token) -> str:
    return f"{tok.context.format()}\t{tok.tag.value}\t{tok.value!r}"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="tugsql-lex", description="Dump the token stream of annotated SQL files")
    ap.add_argument("files", nargs="+", help="SQL files to lex")
    ap.add_argument("--json", action="store_true", help="Print tokens as JSON")
    ap.add_argument(
        "--directives",
        action="store_true",
        help="Also print the keyword/rest split of directive comments",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    files: dict[str, list[Token]] = {}
    try:
        for f in args.files:
            toks = lex_file(f)
            files[toks[0].context.sqlfile] = toks
    except LexError as e:
        print(f"{ap.prog}: error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = {"files": {k: [_to_jsonable(t) for t in v] for k, v in files.items()}}
        print(json.dumps(payload, indent=2, sort_keys=True))
        return 0

    for toks in files.values():
        for tok in toks:
            print(_format_token(tok))
            if not args.directives:
                continue
            parts = lex_comment(tok)
            if parts is not None:
                print("  " + _format_token(parts["keyword"]))
                print("  " + _format_token(parts["rest"]))
    return 0
