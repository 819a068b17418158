"""Persist rendered documents to disk."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from rstwriter.config import RSTWRITER_ENCODING, RSTWRITER_FILE_EXTENSION, RSTWRITER_OUTPUT_DIR
from rstwriter.document import Document
from rstwriter.exceptions import WriteError

logger = logging.getLogger(__name__)


def output_path_for(name: str, directory: Path, extension: str = RSTWRITER_FILE_EXTENSION) -> Path:
    """Get the file path a document called ``name`` is written to.

    The extension is appended unless ``name`` already ends with it.
    """
    if extension and not extension.startswith("."):
        extension = f".{extension}"
    filename = name if name.endswith(extension) else f"{name}{extension}"
    return directory / filename


def write_document(
    document: Document,
    directory: Path | str | None = None,
    *,
    extension: str | None = None,
    encoding: str | None = None,
) -> Path:
    """Render ``document`` and write it to ``<directory>/<name><extension>``.

    Args:
        document: The document to write.
        directory: Target directory, created if missing. Defaults to
            ``RSTWRITER_OUTPUT_DIR``.
        extension: File extension. Defaults to ``RSTWRITER_FILE_EXTENSION``.
        encoding: Text encoding. Defaults to ``RSTWRITER_ENCODING``.

    Returns:
        Path of the written file.

    Raises:
        WriteError: If the directory or file cannot be written.
        BorderResolutionError: If a section is nested deeper than the border
            table allows. Nothing is written in that case.
    """
    target_dir = Path(directory) if directory is not None else RSTWRITER_OUTPUT_DIR
    path = output_path_for(
        document.name,
        target_dir,
        RSTWRITER_FILE_EXTENSION if extension is None else extension,
    )
    text = document.render()
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding=encoding or RSTWRITER_ENCODING)
    except OSError as exc:
        raise WriteError(f"Failed to write {path}: {exc}") from exc
    logger.info("Wrote %s (%d characters)", path, len(text))
    return path


async def write_document_async(
    document: Document,
    directory: Path | str | None = None,
    *,
    extension: str | None = None,
    encoding: str | None = None,
) -> Path:
    """Write a document using a thread pool.

    See :func:`write_document` for arguments and errors.
    """
    return await asyncio.to_thread(
        write_document, document, directory, extension=extension, encoding=encoding
    )
