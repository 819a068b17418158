"""Leaf body elements: paragraphs, transitions, directives and friends."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from rstwriter.config import RSTWRITER_TRANSITION_WIDTH
from rstwriter.inline import Inline

_INDENT = "   "


def indent(text: str, prefix: str = _INDENT) -> str:
    """Indent every non-blank line of ``text``."""
    return "\n".join(prefix + line if line.strip() else "" for line in text.splitlines())


class Paragraph(BaseModel):
    """A paragraph of text with optional inline markup spans.

    Spans may not overlap or touch: docutils needs at least one character
    between two inline markups.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    inlines: tuple[Inline, ...] = ()

    @model_validator(mode="after")
    def check_inlines(self) -> Paragraph:
        previous_end: int | None = None
        for span in sorted(self.inlines, key=lambda inline: inline.start):
            if span.end > len(self.text):
                raise ValueError(
                    f"Inline span {span.start}:{span.end} exceeds paragraph length {len(self.text)}"
                )
            if previous_end is not None and span.start < previous_end:
                raise ValueError(f"Inline span {span.start}:{span.end} overlaps a previous span")
            if previous_end is not None and span.start == previous_end:
                raise ValueError(f"Inline span {span.start}:{span.end} touches a previous span")
            previous_end = span.end
        return self

    def render(self) -> str:
        parts: list[str] = []
        cursor = 0
        for span in sorted(self.inlines, key=lambda inline: inline.start):
            parts.append(self.text[cursor : span.start])
            parts.append(span.apply(self.text[span.start : span.end]))
            cursor = span.end
        parts.append(self.text[cursor:])
        return "".join(parts)


class Transition(BaseModel):
    """A horizontal rule between body elements."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=RSTWRITER_TRANSITION_WIDTH, ge=4)

    def render(self) -> str:
        return "-" * self.width


class Directive(BaseModel):
    """An explicit markup directive such as ``.. note::`` or ``.. image::``.

    Options with a ``None`` value render as flags (``:name:``).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    arguments: tuple[str, ...] = ()
    options: dict[str, str | None] = Field(default_factory=dict)
    content: str = ""

    def render(self) -> str:
        header = f".. {self.name}::"
        if self.arguments:
            header += " " + " ".join(self.arguments)
        lines = [header]
        for key, value in self.options.items():
            lines.append(f"{_INDENT}:{key}:" if value is None else f"{_INDENT}:{key}: {value}")
        if self.content:
            lines.append("")
            lines.append(indent(self.content))
        return "\n".join(lines)


class LiteralBlock(BaseModel):
    """Preformatted text introduced by ``::``."""

    model_config = ConfigDict(frozen=True)

    text: str

    def render(self) -> str:
        return "::\n\n" + indent(self.text)


class BulletList(BaseModel):
    """A flat bullet list, one item per entry."""

    model_config = ConfigDict(frozen=True)

    items: tuple[str, ...] = Field(..., min_length=1)

    def render(self) -> str:
        return "\n".join("- " + item.replace("\n", "\n  ") for item in self.items)
