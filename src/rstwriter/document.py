"""Documents: the outermost, untitled container of a reStructuredText file."""

from __future__ import annotations

import logging

from rstwriter.content import ROOT_LEVEL, ContentContainer, Renderable
from rstwriter.definitions import Definition, LinkTarget
from rstwriter.elements import Directive, Paragraph, Transition
from rstwriter.inline import Inline
from rstwriter.section import Section

logger = logging.getLogger(__name__)


class Document:
    """A fully constructed reStructuredText document, ready to be written.

    ``name`` is the file name without extension; it is not rendered. Use
    :func:`rstwriter.writer.write_document` to persist the text.
    """

    __slots__ = ("_content",)

    def __init__(self, content: ContentContainer) -> None:
        self._content = content

    @classmethod
    def builder(cls, name: str) -> DocumentBuilder:
        return DocumentBuilder(name)

    @property
    def name(self) -> str:
        return self._content.title

    def render(self) -> str:
        return self._content.render()

    def __repr__(self) -> str:
        return f"Document(name={self._content.title!r})"


class DocumentBuilder:
    """Accumulate content for a :class:`Document`.

    Content renders in order of addition, except definitions, which render
    after everything else. Sections are added already built. ``build`` may be
    called repeatedly; each document is independent of later additions.
    Builders are not thread-safe; built documents are.
    """

    def __init__(self, name: str) -> None:
        self._content = ContentContainer(name, level=ROOT_LEVEL)

    def add_paragraph(self, text: str, *inlines: Inline) -> DocumentBuilder:
        """Append a paragraph with optional inline markup spans."""
        self._content.add(Paragraph(text=text, inlines=inlines))
        return self

    def add_body_element(self, element: Renderable) -> DocumentBuilder:
        """Append any renderable at the current position."""
        self._content.add(element)
        return self

    def add_directive(self, directive: Directive) -> DocumentBuilder:
        """Append a directive block."""
        self._content.add(directive)
        return self

    def add_link_target(self, name: str) -> DocumentBuilder:
        """Place a ``.. _name:`` target at the very top of the document."""
        self._content.add_link_target(LinkTarget(name=name))
        return self

    def add_definition(self, definition: Definition) -> DocumentBuilder:
        """Queue a definition to render after all other content."""
        self._content.add_definition(definition)
        return self

    def add_section(self, section: Section) -> DocumentBuilder:
        """Append a copy of a built section as top-level content."""
        self._content.add(section.content)
        return self

    def add_transition(self) -> DocumentBuilder:
        """Append a horizontal transition."""
        self._content.add(Transition())
        return self

    def build(self) -> Document:
        """Snapshot the accumulated content into an immutable :class:`Document`."""
        logger.debug("Building document %r", self._content.title)
        return Document(self._content.copy())
