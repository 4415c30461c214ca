from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Context:
    """A position in a SQL source unit.

    ``line`` starts at 0, meaning no line has been consumed yet; ``col`` is
    1-based.
    """

    sqlfile: str
    line: int = 0
    col: int = 1

    def format(self) -> str:
        return f"{self.sqlfile}:{self.line}:{self.col}"


def advance(context: Context, lines: int = 0, cols: int = 0) -> Context:
    """Return a new context further along in the same file.

    Advancing by lines resets the column to 1 and ignores ``cols``.
    """
    col = context.col + cols if lines == 0 else 1
    return Context(context.sqlfile, context.line + lines, col)
