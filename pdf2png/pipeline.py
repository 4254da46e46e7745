from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Callable, TextIO

from .errors import DocumentError
from .fs import page_image_path
from .models import ConversionReport, RunConfig
from .renderer import PdfRenderer
from .report import emit_json, print_summary


logger = logging.getLogger(__name__)


def load_document(config: RunConfig, stream: BinaryIO, renderer: PdfRenderer) -> ConversionReport:
    """
    Parse the source stream and build an empty report for it.

    Raises DocumentError if the document cannot be parsed or its page count read.
    """
    try:
        renderer.open(stream)
    except Exception as exc:
        raise DocumentError(f"Error opening PDF: {exc}") from exc

    try:
        page_count = renderer.page_count
    except Exception as exc:
        raise DocumentError(f"Error opening PDF: {exc}") from exc

    try:
        author = renderer.author
    except Exception as exc:
        logger.warning("Failed to read document metadata for %s: %s", config.source, exc)
        author = None

    return ConversionReport(source=str(config.source), pages=page_count, author=author)


def render_pages(
    renderer: PdfRenderer,
    report: ConversionReport,
    destination: Path,
    progress_callback: Callable[[str], None] | None = None,
    out: TextIO | None = None,
) -> ConversionReport:
    """
    Render pages 1..report.pages into `destination`, one attempt per page.

    Failures are appended to `report.errors` and the scan moves on to the next page.
    When `out` is given each failure is also printed there as it happens.
    """

    def _notify(message: str) -> None:
        if progress_callback:
            progress_callback(message)

    def _record(page_num: int, reason: str) -> None:
        error = report.add_error(page_num, reason)
        logger.error(error.reason)
        if out is not None:
            print(error.reason, file=out)

    for page_num in range(1, report.pages + 1):
        try:
            page = renderer.get_page(page_num)
        except Exception as exc:
            _record(page_num, f"Error getting page {page_num}: {exc}")
            continue

        output_path = page_image_path(destination, page_num)
        try:
            renderer.render_to_path(page, output_path)
        except Exception as exc:
            _record(page_num, f"Error creating image from page {page_num}: {exc}")
            continue

        report.rendered.append(output_path)
        _notify(f"Rendered page {page_num}/{report.pages} -> {output_path}")

    return report


def convert(
    config: RunConfig,
    out: TextIO,
    progress_callback: Callable[[str], None] | None = None,
) -> ConversionReport:
    """
    Run the load -> render -> report pipeline for one configuration.

    The source stream and the parsed document are released on every exit path;
    an error raised while closing the stream propagates to the caller.
    """
    destination = config.destination.absolute()
    with config.source.open("rb") as stream, PdfRenderer(width=config.width) as renderer:
        report = load_document(config, stream, renderer)
        print_summary(destination, report.pages, out)
        inline_errors = None if config.json_output else out
        render_pages(renderer, report, destination, progress_callback, out=inline_errors)

    if config.json_output:
        emit_json(report, out)
    return report


__all__ = [
    "convert",
    "load_document",
    "render_pages",
]
