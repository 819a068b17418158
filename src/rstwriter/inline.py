"""Inline markup spans applied to paragraph text."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class InlineKind(str, Enum):
    """Enumeration of inline markup styles."""

    EMPHASIS = "emphasis"
    STRONG = "strong"
    LITERAL = "literal"
    INTERPRETED = "interpreted"
    HYPERLINK = "hyperlink"
    SUBSTITUTION = "substitution"
    ROLE = "role"


class Inline(BaseModel):
    """Markup applied to ``text[start:end]`` of the enclosing paragraph.

    Attributes
    ----------
    kind : InlineKind
        Markup style.
    start : int
        Index of the first marked character.
    end : int
        Index one past the last marked character.
    target : str | None
        Link URL for ``HYPERLINK`` (optional) or role name for ``ROLE``
        (required).

    """

    model_config = ConfigDict(frozen=True)

    kind: InlineKind
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=1)
    target: str | None = None

    @model_validator(mode="after")
    def check_span(self) -> Inline:
        if self.end <= self.start:
            raise ValueError(f"Inline span end ({self.end}) must be greater than start ({self.start})")
        if self.kind is InlineKind.ROLE and not self.target:
            raise ValueError("ROLE inline markup requires a role name as target")
        return self

    def apply(self, text: str) -> str:
        """Wrap ``text`` (the already sliced span) in this markup."""
        if self.kind is InlineKind.EMPHASIS:
            return f"*{text}*"
        if self.kind is InlineKind.STRONG:
            return f"**{text}**"
        if self.kind is InlineKind.LITERAL:
            return f"``{text}``"
        if self.kind is InlineKind.INTERPRETED:
            return f"`{text}`"
        if self.kind is InlineKind.HYPERLINK:
            if self.target:
                return f"`{text} <{self.target}>`_"
            return f"`{text}`_"
        if self.kind is InlineKind.SUBSTITUTION:
            return f"|{text}|"
        return f":{self.target}:`{text}`"


def emphasis(start: int, end: int) -> Inline:
    return Inline(kind=InlineKind.EMPHASIS, start=start, end=end)


def strong(start: int, end: int) -> Inline:
    return Inline(kind=InlineKind.STRONG, start=start, end=end)


def literal(start: int, end: int) -> Inline:
    return Inline(kind=InlineKind.LITERAL, start=start, end=end)


def hyperlink(start: int, end: int, url: str | None = None) -> Inline:
    return Inline(kind=InlineKind.HYPERLINK, start=start, end=end, target=url)


def role(name: str, start: int, end: int) -> Inline:
    return Inline(kind=InlineKind.ROLE, start=start, end=end, target=name)
