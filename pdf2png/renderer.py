from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

import pypdfium2 as pdfium
from PIL import Image

from .constants import DEFAULT_WIDTH


logger = logging.getLogger(__name__)


class PdfRenderer:
    """
    Rasterizes pages of one PDF document to PNG files at a fixed output width.

    The document is read lazily from the stream passed to `open`, so the stream
    must stay open until `close` has been called.
    """

    def __init__(self, width: int = DEFAULT_WIDTH) -> None:
        if width <= 0:
            raise ValueError("width must be positive.")
        self._width = width
        self._doc: pdfium.PdfDocument | None = None

    def __enter__(self) -> PdfRenderer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def width(self) -> int:
        return self._width

    def open(self, stream: BinaryIO) -> None:
        if self._doc is not None:
            raise RuntimeError("A document is already open.")
        self._doc = pdfium.PdfDocument(stream)

    def _require_doc(self) -> pdfium.PdfDocument:
        if self._doc is None:
            raise RuntimeError("PDF not loaded.")
        return self._doc

    @property
    def page_count(self) -> int:
        return len(self._require_doc())

    @property
    def author(self) -> str | None:
        metadata = self._require_doc().get_metadata_dict(skip_empty=True)
        author = metadata.get("Author", "").strip()
        return author or None

    def get_page(self, page_num: int) -> pdfium.PdfPage:
        """Load a page by its 1-based number."""
        doc = self._require_doc()
        if page_num < 1 or page_num > len(doc):
            raise IndexError(f"Page {page_num} out of range 1..{len(doc)}")
        return doc.get_page(page_num - 1)

    def render_to_path(self, page: pdfium.PdfPage, path: Path) -> Path:
        """
        Render `page` to a PNG at the configured width and save it to `path`.

        Height follows the page aspect ratio. The page handle is closed afterwards.
        """
        try:
            page_width, page_height = page.get_size()
            if page_width <= 0 or page_height <= 0:
                raise ValueError(f"Invalid page size: {page_width}x{page_height}")
            scale = self._width / page_width
            bitmap = page.render(scale=scale)
            try:
                image = bitmap.to_pil()
                try:
                    if image.width != self._width:
                        height = max(1, round(page_height * scale))
                        resized = image.resize((self._width, height), Image.Resampling.LANCZOS)
                        image.close()
                        image = resized
                    image.save(path, format="PNG")
                finally:
                    image.close()
            finally:
                bitmap.close()
        finally:
            page.close()
        logger.debug("Rendered %s (%dpx wide)", path, self._width)
        return path

    def close(self) -> None:
        if self._doc is not None:
            try:
                self._doc.close()
            finally:
                self._doc = None


__all__ = ["PdfRenderer"]
