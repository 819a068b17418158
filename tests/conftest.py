"""Test setup for rstwriter."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from docutils import nodes
from docutils.core import publish_doctree

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def parse_rst():
    """Parse reStructuredText with docutils, failing on any warning."""

    def _parse(text: str) -> nodes.document:
        return publish_doctree(
            text,
            settings_overrides={
                "doctitle_xform": False,
                "halt_level": 2,
                "report_level": 5,
            },
        )

    return _parse
