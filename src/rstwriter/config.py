"""Local configuration for rstwriter."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_FILE_EXTENSION = ".rst"
DEFAULT_ENCODING = "utf-8"
DEFAULT_OUTPUT_DIR = "."
DEFAULT_TRANSITION_WIDTH = 4

# Docutils rejects transitions shorter than four characters.
MIN_TRANSITION_WIDTH = 4

RSTWRITER_FILE_EXTENSION = os.getenv("RSTWRITER_FILE_EXTENSION", DEFAULT_FILE_EXTENSION)
RSTWRITER_ENCODING = os.getenv("RSTWRITER_ENCODING", DEFAULT_ENCODING)
RSTWRITER_OUTPUT_DIR = Path(os.getenv("RSTWRITER_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)).expanduser()
RSTWRITER_TRANSITION_WIDTH = max(
    MIN_TRANSITION_WIDTH,
    int(os.getenv("RSTWRITER_TRANSITION_WIDTH", str(DEFAULT_TRANSITION_WIDTH))),
)
