"""Explicit markup definitions: targets, footnotes, citations, substitutions."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from rstwriter.elements import indent


class LinkTarget(BaseModel):
    """Hyperlink target ``.. _name:`` with an optional URL.

    Without a URL the target points at whatever follows it, which is how
    section anchors are rendered.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    url: str = ""

    def render(self) -> str:
        name = f"`{self.name}`" if ":" in self.name else self.name
        if self.url:
            return f".. _{name}: {self.url}"
        return f".. _{name}:"


class Footnote(BaseModel):
    """Footnote body; ``label`` may be a number, ``#``, ``#name`` or ``*``."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1)
    text: str

    def render(self) -> str:
        return _explicit(f".. [{self.label}]", self.text)


class Citation(BaseModel):
    """Citation body referenced as ``[label]_``."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1)
    text: str

    def render(self) -> str:
        return _explicit(f".. [{self.label}]", self.text)


class Substitution(BaseModel):
    """Substitution definition ``.. |name| directive:: argument``."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    directive: str = "replace"
    argument: str

    def render(self) -> str:
        return f".. |{self.name}| {self.directive}:: {self.argument}"


class Comment(BaseModel):
    """Comment kept in the source and dropped by docutils."""

    model_config = ConfigDict(frozen=True)

    text: str

    def render(self) -> str:
        return _explicit("..", self.text)


Definition = Union[LinkTarget, Footnote, Citation, Substitution, Comment]


def _explicit(marker: str, text: str) -> str:
    first, _, rest = text.partition("\n")
    head = f"{marker} {first}"
    if not rest:
        return head
    return f"{head}\n{indent(rest)}"
