"""Sections (headings) and the stack-based builder that assembles them."""

from __future__ import annotations

import logging

from rstwriter.content import ContentContainer, Renderable
from rstwriter.definitions import Definition, LinkTarget
from rstwriter.elements import Directive, Paragraph, Transition
from rstwriter.exceptions import SectionStateError
from rstwriter.inline import Inline

logger = logging.getLogger(__name__)


class Section:
    """An immutable, titled and bordered division of content.

    Sections nest: a top-level section is overlined and underlined with
    ``#``, its sub-sections with ``*``, and deeper levels are underlined with
    ``=``, ``-``, ``^`` and so on (see :mod:`rstwriter.borders`)::

        ###########
        Top Section
        ###########

        *************
        Lower Section
        *************

        Third Section
        =============

    Instances are produced by :meth:`SectionBuilder.build` and are safe to
    share between threads.
    """

    __slots__ = ("_content",)

    def __init__(self, content: ContentContainer) -> None:
        self._content = content

    @classmethod
    def builder(cls, title: str) -> SectionBuilder:
        return SectionBuilder(title)

    @property
    def content(self) -> ContentContainer:
        """Independent copy of the section's container."""
        return self._content.copy()

    def render(self) -> str:
        """Return the reStructuredText for this section and its sub-sections."""
        return self._content.render()

    def __repr__(self) -> str:
        return f"Section(title={self._content.title!r}, level={self._content.level})"


class SectionBuilder:
    """Accumulate content for a :class:`Section`.

    Additions appear in the order they are made. Link targets are the
    exception: they render right before the section title. Definitions render
    after all other content. Use :meth:`add_body_element` to place either at
    an exact position instead.

    Sub-sections are written inline with :meth:`open_sub_section` and
    :meth:`close_sub_section`; while one is open every addition lands in it.
    Builders are not thread-safe; built sections are.
    """

    def __init__(self, title: str) -> None:
        self._current = ContentContainer(title, level=0)
        self._parent_stack: list[ContentContainer] = []

    @property
    def level(self) -> int:
        """Level of the section currently receiving additions."""
        return self._current.level

    @property
    def depth(self) -> int:
        """Number of sub-sections currently open."""
        return len(self._parent_stack)

    def add_paragraph(self, text: str, *inlines: Inline) -> SectionBuilder:
        """Append a paragraph with optional inline markup spans."""
        self._current.add(Paragraph(text=text, inlines=inlines))
        return self

    def add_body_element(self, element: Renderable) -> SectionBuilder:
        """Append any renderable at the current position."""
        self._current.add(element)
        return self

    def add_directive(self, directive: Directive) -> SectionBuilder:
        """Append a directive block."""
        self._current.add(directive)
        return self

    def add_link_target(self, name: str) -> SectionBuilder:
        """Place a ``.. _name:`` target above the title of the current section."""
        self._current.add_link_target(LinkTarget(name=name))
        return self

    def add_definition(self, definition: Definition) -> SectionBuilder:
        """Queue a definition to render after all other content."""
        self._current.add_definition(definition)
        return self

    def add_transition(self) -> SectionBuilder:
        """Append a horizontal transition."""
        self._current.add(Transition())
        return self

    def add_sub_section(self, section: Section) -> SectionBuilder:
        """Append an already built section one level below the current one."""
        self._current.add(section._content.copy(level=self._current.level + 1))
        return self

    def open_sub_section(self, title: str) -> SectionBuilder:
        """Start a sub-section; following additions go into it until closed."""
        self._parent_stack.append(self._current)
        self._current = ContentContainer(title, level=self._current.level + 1)
        logger.debug("Opened sub-section %r at level %d", title, self._current.level)
        return self

    def close_sub_section(self) -> SectionBuilder:
        """Finish the open sub-section and append it to its parent.

        Raises:
            SectionStateError: If no sub-section is open.
        """
        if not self._parent_stack:
            raise SectionStateError("No sub-section is open")
        parent = self._parent_stack.pop()
        parent.add(self._current)
        logger.debug("Closed sub-section %r", self._current.title)
        self._current = parent
        return self

    def build(self) -> Section:
        """Snapshot the accumulated content into an immutable :class:`Section`.

        The builder stays usable; later additions never affect sections that
        were already built.

        Raises:
            SectionStateError: If sub-sections are still open.
        """
        if self._parent_stack:
            raise SectionStateError(
                f"Cannot build section with {len(self._parent_stack)} unclosed sub-section(s)"
            )
        logger.debug("Building section %r", self._current.title)
        return Section(self._current.copy())
