"""Tests for Document and DocumentBuilder."""

from __future__ import annotations

import pytest
from docutils import nodes

from rstwriter.content import ROOT_LEVEL
from rstwriter.definitions import Footnote, Substitution
from rstwriter.document import Document, DocumentBuilder
from rstwriter.elements import BulletList, Directive, Paragraph
from rstwriter.inline import Inline, InlineKind, strong
from rstwriter.section import SectionBuilder


def _intro_section():
    return (
        SectionBuilder("Intro")
        .open_sub_section("Details")
        .close_sub_section()
        .build()
    )


class TestDocumentBuilder:
    """Tests for accumulating content in a DocumentBuilder."""

    def test_builder_factory(self) -> None:
        assert isinstance(Document.builder("index"), DocumentBuilder)

    def test_name_is_not_rendered(self) -> None:
        document = DocumentBuilder("index").add_paragraph("Hello.").build()

        assert document.name == "index"
        assert document.render() == "Hello.\n"

    def test_empty_document(self) -> None:
        assert DocumentBuilder("empty").build().render() == ""

    def test_intro_details_example(self) -> None:
        document = (
            DocumentBuilder("index")
            .add_paragraph("Preamble.")
            .add_section(_intro_section())
            .build()
        )

        assert document.render() == (
            "Preamble.\n"
            "\n"
            "#####\n"
            "Intro\n"
            "#####\n"
            "\n"
            "*******\n"
            "Details\n"
            "*******\n"
        )

    def test_sections_sit_one_below_root(self) -> None:
        section = _intro_section()

        assert ROOT_LEVEL == -1
        assert section.content.level == ROOT_LEVEL + 1

    def test_sections_keep_order_of_addition(self) -> None:
        first = SectionBuilder("First").build()
        second = SectionBuilder("Second").build()

        text = DocumentBuilder("index").add_section(second).add_section(first).build().render()

        assert text.index("Second") < text.index("First")

    def test_definitions_render_last(self) -> None:
        text = (
            DocumentBuilder("index")
            .add_definition(Footnote(label="1", text="Footnote text."))
            .add_paragraph("Text [1]_.")
            .add_section(SectionBuilder("Section").add_paragraph("Body.").build())
            .build()
            .render()
        )

        assert text.endswith("Body.\n\n.. [1] Footnote text.\n")

    def test_link_targets_at_top(self) -> None:
        text = DocumentBuilder("index").add_paragraph("Body.").add_link_target("top").build().render()

        assert text == ".. _top:\n\nBody.\n"

    def test_transition_between_paragraphs(self) -> None:
        text = (
            DocumentBuilder("index")
            .add_paragraph("One.")
            .add_transition()
            .add_paragraph("Two.")
            .build()
            .render()
        )

        assert text.startswith("One.\n\n----")
        assert text.endswith("\n\nTwo.\n")


class TestSnapshots:
    """Tests for Document snapshot isolation."""

    def test_repeated_builds_are_identical(self) -> None:
        builder = DocumentBuilder("index").add_paragraph("A.").add_section(_intro_section())

        assert builder.build().render() == builder.build().render()

    def test_later_mutation_not_visible(self) -> None:
        builder = DocumentBuilder("index").add_paragraph("A.")
        document = builder.build()

        builder.add_paragraph("B.").add_section(_intro_section())

        assert document.render() == "A.\n"

    def test_document_surface_cannot_change_render(self) -> None:
        section = _intro_section()
        document = DocumentBuilder("index").add_paragraph("A.").add_section(section).build()
        before = document.render()

        section.content.add(Paragraph(text="Injected."))
        section.content.body.clear()

        assert document.render() == before
        assert document.name == "index"
        with pytest.raises(AttributeError):
            document.name = "other"
        with pytest.raises(AttributeError):
            document.extra = "value"
        assert document.render() == before

    def test_section_reused_across_documents(self) -> None:
        section = _intro_section()
        first = DocumentBuilder("one").add_section(section).build()
        second = DocumentBuilder("two").add_section(section).add_paragraph("Tail.").build()

        assert first.render() == section.render()
        assert second.render() == section.render() + "\nTail.\n"


class TestValidity:
    """Rendered documents parse cleanly with docutils."""

    def test_full_document_parses(self, parse_rst) -> None:
        api = (
            SectionBuilder("API")
            .add_link_target("api-reference")
            .add_paragraph("The |project| API is **stable**.")
            .add_body_element(BulletList(items=("Sections", "Documents")))
            .open_sub_section("Builders")
            .add_paragraph(
                "Use SectionBuilder to nest content.",
                Inline(kind=InlineKind.LITERAL, start=4, end=18),
            )
            .add_directive(
                Directive(
                    name="note",
                    options={"class": "builders"},
                    content="Builders are not thread-safe.",
                )
            )
            .close_sub_section()
            .build()
        )
        document = (
            DocumentBuilder("index")
            .add_paragraph("Welcome, see api-reference_.", strong(0, 7))
            .add_transition()
            .add_paragraph("Generated text follows.")
            .add_section(SectionBuilder("Overview").add_paragraph("Overview.").build())
            .add_section(api)
            .add_definition(Substitution(name="project", argument="rstwriter"))
            .build()
        )

        doctree = parse_rst(document.render())

        sections = list(doctree.findall(nodes.section))
        assert [section[0].astext() for section in sections] == ["Overview", "API", "Builders"]
        assert len(list(doctree.findall(nodes.transition))) == 1
        assert len(list(doctree.findall(nodes.literal))) == 1
