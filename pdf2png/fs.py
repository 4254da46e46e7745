from __future__ import annotations

from pathlib import Path

from .constants import PAGE_FILENAME_TEMPLATE


def prepare_destination(destination: Path) -> Path:
    """
    Create the destination directory if it is missing.

    Only the last path component is created; a missing parent is an error.
    """
    if destination.is_dir():
        return destination
    destination.mkdir(exist_ok=True)
    return destination


def page_image_path(destination: Path, page_num: int) -> Path:
    """Return the output PNG path for a 1-based page number."""
    if page_num < 1:
        raise ValueError(f"Page numbers are 1-based, got {page_num}")
    return destination / PAGE_FILENAME_TEMPLATE.format(page_num=page_num)


__all__ = [
    "page_image_path",
    "prepare_destination",
]
