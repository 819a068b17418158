"""rstwriter: build reStructuredText documents from nested sections."""

from rstwriter.borders import BORDER_CHARACTERS, BorderStyle, resolve_border
from rstwriter.content import ROOT_LEVEL, ContentContainer, Renderable
from rstwriter.definitions import Citation, Comment, Definition, Footnote, LinkTarget, Substitution
from rstwriter.document import Document, DocumentBuilder
from rstwriter.elements import BulletList, Directive, LiteralBlock, Paragraph, Transition
from rstwriter.exceptions import (
    BorderResolutionError,
    RstWriterError,
    SectionStateError,
    WriteError,
)
from rstwriter.inline import Inline, InlineKind
from rstwriter.section import Section, SectionBuilder
from rstwriter.writer import write_document, write_document_async

__all__ = [
    "BORDER_CHARACTERS",
    "BorderResolutionError",
    "BorderStyle",
    "BulletList",
    "Citation",
    "Comment",
    "ContentContainer",
    "Definition",
    "Directive",
    "Document",
    "DocumentBuilder",
    "Footnote",
    "Inline",
    "InlineKind",
    "LinkTarget",
    "LiteralBlock",
    "Paragraph",
    "ROOT_LEVEL",
    "Renderable",
    "RstWriterError",
    "Section",
    "SectionBuilder",
    "SectionStateError",
    "Substitution",
    "Transition",
    "WriteError",
    "resolve_border",
    "write_document",
    "write_document_async",
]
