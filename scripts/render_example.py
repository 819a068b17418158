"""Render a sample reStructuredText document to stdout or a file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rstwriter import (
    Directive,
    DocumentBuilder,
    Footnote,
    LinkTarget,
    SectionBuilder,
    write_document,
)
from rstwriter.inline import hyperlink, strong


def build_sample(name: str):
    usage = (
        SectionBuilder("Usage")
        .add_link_target("usage")
        .add_paragraph("Builders nest sections with a stack.", strong(0, 8))
        .open_sub_section("Sections")
        .add_paragraph("Call open_sub_section and close_sub_section in pairs [1]_.")
        .add_definition(Footnote(label="1", text="build() refuses unbalanced builders."))
        .close_sub_section()
        .open_sub_section("Documents")
        .add_directive(Directive(name="note", content="Documents hold built sections."))
        .close_sub_section()
        .build()
    )
    return (
        DocumentBuilder(name)
        .add_paragraph("Read the docutils docs first.", hyperlink(9, 17))
        .add_transition()
        .add_paragraph("Then jump to usage_.")
        .add_section(usage)
        .add_definition(LinkTarget(name="docutils", url="https://docutils.sourceforge.io/"))
        .build()
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a sample reStructuredText document.")
    parser.add_argument("--name", default="sample", help="Document name (file name without extension)")
    parser.add_argument("--out", help="Directory to write to; prints to stdout when omitted")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    document = build_sample(args.name)

    if args.out:
        path = write_document(document, Path(args.out))
        print(f"Wrote {path}")
    else:
        print(document.render(), end="")


if __name__ == "__main__":
    main()
