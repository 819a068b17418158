"""Content containers: the tree nodes behind sections and documents."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from docutils.utils import column_width

from rstwriter.borders import resolve_border

if TYPE_CHECKING:
    from rstwriter.definitions import Definition, LinkTarget

ROOT_LEVEL = -1


@runtime_checkable
class Renderable(Protocol):
    """Anything that can produce a block of reStructuredText."""

    def render(self) -> str: ...


class ContentContainer:
    """Title, body, link targets and definitions of one section or document.

    Body items render in insertion order. Link targets render before the
    title block and definitions after the whole body, each in their own
    insertion order. Nested sections are stored in ``body`` as containers.
    """

    def __init__(self, title: str, level: int = 0) -> None:
        self._title = title
        self._level = level
        self.body: list[Renderable] = []
        self.link_targets: list[LinkTarget] = []
        self.definitions: list[Definition] = []

    @property
    def title(self) -> str:
        return self._title

    @property
    def level(self) -> int:
        return self._level

    @property
    def is_root(self) -> bool:
        return self._level == ROOT_LEVEL

    def add(self, item: Renderable) -> None:
        self.body.append(item)

    def add_link_target(self, target: LinkTarget) -> None:
        self.link_targets.append(target)

    def add_definition(self, definition: Definition) -> None:
        self.definitions.append(definition)

    def copy(self, level: int | None = None) -> ContentContainer:
        """Return an independent deep copy of this container.

        Nested containers are copied recursively. When ``level`` is given the
        copy sits at that level and its descendants keep their relative depth.
        """
        new_level = self._level if level is None else level
        clone = ContentContainer(self._title, new_level)
        for item in self.body:
            if isinstance(item, ContentContainer):
                clone.body.append(item.copy(new_level + (item.level - self._level)))
            else:
                clone.body.append(copy.deepcopy(item))
        clone.link_targets = copy.deepcopy(self.link_targets)
        clone.definitions = copy.deepcopy(self.definitions)
        return clone

    def render(self) -> str:
        """Render this container and all of its descendants."""
        blocks: list[str] = []
        if self.link_targets:
            blocks.append("\n".join(_block(target) for target in self.link_targets))
        if not self.is_root:
            blocks.append(self._render_title())
        blocks.extend(_block(item) for item in self.body)
        blocks.extend(_block(definition) for definition in self.definitions)
        blocks = [block for block in blocks if block]
        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"

    def _render_title(self) -> str:
        border = resolve_border(self._level)
        line = border.line(column_width(self._title))
        if border.overline:
            return f"{line}\n{self._title}\n{line}"
        return f"{self._title}\n{line}"

    def __repr__(self) -> str:
        return (
            f"ContentContainer(title={self._title!r}, level={self._level}, "
            f"body={len(self.body)}, link_targets={len(self.link_targets)}, "
            f"definitions={len(self.definitions)})"
        )


def _block(item: Renderable) -> str:
    return item.render().strip("\n")
