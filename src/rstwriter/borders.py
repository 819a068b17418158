"""Section border characters by nesting depth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from rstwriter.exceptions import BorderResolutionError

# Highest priority first. Index is the section level.
BORDER_CHARACTERS: Final[tuple[str, ...]] = (
    "#", "*", "=", "-", "^", '"', "'", ":", ".",
    "/", ";", "\\", ",", "`", "[", "{", "(", "<",
)
OVERLINED_LEVELS: Final = 2
MAX_LEVEL: Final = len(BORDER_CHARACTERS) - 1


@dataclass(frozen=True)
class BorderStyle:
    """Border glyph for one section level."""

    char: str
    overline: bool

    def line(self, width: int) -> str:
        return self.char * width


def resolve_border(level: int) -> BorderStyle:
    """Return the border style for a section at ``level``.

    Levels 0 and 1 are overlined and underlined; deeper levels are underlined
    only.

    Raises:
        BorderResolutionError: If ``level`` falls outside the border table.
    """
    if level < 0 or level > MAX_LEVEL:
        raise BorderResolutionError(
            level,
            f"Section level {level} is outside the supported range 0..{MAX_LEVEL}",
        )
    return BorderStyle(char=BORDER_CHARACTERS[level], overline=level < OVERLINED_LEVELS)
