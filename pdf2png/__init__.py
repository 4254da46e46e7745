from __future__ import annotations

from .cli import main
from .models import ConversionReport, PageError, RunConfig
from .renderer import PdfRenderer

__all__ = [
    "ConversionReport",
    "PageError",
    "PdfRenderer",
    "RunConfig",
    "main",
]
