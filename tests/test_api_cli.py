from __future__ import annotations

import json
from pathlib import Path

import pytest

from tugsql import Context, LexError, Tag, Token, lex_file, lex_source
from tugsql.cli import main


SQL_DIR = Path(__file__).parent / "sql"


def test_lex_source_defaults_to_literal() -> None:
    assert lex_source("select 1") == [Token(Tag.QUERY, "select 1", Context("<literal>", 1, 1))]


def test_lex_source_label() -> None:
    (tok,) = lex_source("-- :name a", sqlfile="a.sql")
    assert tok.context == Context("a.sql", 1, 1)


def test_lex_file_uses_resolved_path(tmp_path: Path) -> None:
    p = tmp_path / "q.sql"
    p.write_text("-- :name q\n  select 1", encoding="utf-8")
    sqlfile = str(p.resolve())
    assert lex_file(p) == [
        Token(Tag.COMMENT, "-- :name q", Context(sqlfile, 1, 1)),
        Token(Tag.QUERY, "select 1", Context(sqlfile, 2, 3)),
    ]


def test_lex_file_missing(tmp_path: Path) -> None:
    with pytest.raises(LexError) as e:
        lex_file(tmp_path / "missing.sql")
    assert "file not found" in str(e.value)
    assert "missing.sql" in str(e.value)
    assert "hint:" in str(e.value)


def test_lex_file_directory(tmp_path: Path) -> None:
    with pytest.raises(LexError) as e:
        lex_file(tmp_path)
    assert "not a regular file" in str(e.value)


def test_lex_file_bad_encoding(tmp_path: Path) -> None:
    p = tmp_path / "latin1.sql"
    p.write_bytes(b"select '\xe9'")
    with pytest.raises(LexError) as e:
        lex_file(p)
    assert "utf-8" in str(e.value)


def test_lex_error_str_without_hint() -> None:
    assert str(LexError(Context("x.sql"), "boom")) == "x.sql:0:1: boom"


def test_cli_text_output(capsys: pytest.CaptureFixture[str]) -> None:
    path = SQL_DIR / "basic.sql"
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    sqlfile = str(path.resolve())
    assert out == [
        f"{sqlfile}:1:1\tC\t'-- :name username_for_id :1'",
        f"{sqlfile}:2:1\tQ\t'select username from users where user_id = :user_id'",
        f"{sqlfile}:3:1\tQ\t''",
    ]


def test_cli_directives(capsys: pytest.CaptureFixture[str]) -> None:
    path = SQL_DIR / "multi.sql"
    assert main(["--directives", str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    sqlfile = str(path.resolve())
    assert out[:4] == [
        f"{sqlfile}:1:1\tC\t'-- :name user_by_id :1'",
        f"  {sqlfile}:1:4\tK\t':name'",
        f"  {sqlfile}:1:10\tS\t'user_by_id :1'",
        f"{sqlfile}:2:1\tC\t'-- Look up a single user.'",
    ]
    assert out[4] == f"{sqlfile}:3:1\tQ\t'select * from users'"


def test_cli_json(capsys: pytest.CaptureFixture[str]) -> None:
    path = SQL_DIR / "basic.sql"
    assert main(["--json", str(path)]) == 0
    payload = json.loads(capsys.readouterr().out)
    sqlfile = str(path.resolve())
    toks = payload["files"][sqlfile]
    assert len(toks) == 3
    assert toks[0] == {
        "tag": "C",
        "value": "-- :name username_for_id :1",
        "context": {"sqlfile": sqlfile, "line": 1, "col": 1},
    }


def test_cli_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "nope.sql")]) == 1
    err = capsys.readouterr().err
    assert err.startswith("tugsql-lex: error: ")
    assert "file not found" in err
