from __future__ import annotations

from dataclasses import dataclass

from .context import Context


@dataclass(slots=True)
class LexError(Exception):
    context: Context
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.context.format()}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base
