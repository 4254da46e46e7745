from __future__ import annotations

from pathlib import Path
from typing import Callable

import pypdfium2 as pdfium
import pytest


LETTER = (612, 792)


def write_pdf(path: Path, page_count: int, size: tuple[float, float] = LETTER) -> Path:
    pdf = pdfium.PdfDocument.new()
    try:
        for _ in range(page_count):
            page = pdf.new_page(*size)
            page.close()
        pdf.save(path)
    finally:
        pdf.close()
    return path


@pytest.fixture
def make_pdf(tmp_path: Path) -> Callable[..., Path]:
    def _make(page_count: int, name: str = "source.pdf", size: tuple[float, float] = LETTER) -> Path:
        return write_pdf(tmp_path / name, page_count, size)

    return _make
