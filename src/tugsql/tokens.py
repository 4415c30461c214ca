from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .context import Context


class Tag(str, Enum):
    # Line tokens
    COMMENT = "C"
    QUERY = "Q"

    # Sub-tokens produced by the extractors
    KEYWORD = "K"
    NAME = "N"
    SEGMENT = "S"


@dataclass(frozen=True, slots=True)
class Token:
    tag: Tag
    value: str | None  # None: the optional component was absent
    context: Context

    def __repr__(self) -> str:
        return f"Token({self.tag.name}, {self.value!r}, {self.context.format()})"
