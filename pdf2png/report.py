from __future__ import annotations

import json
from pathlib import Path
from typing import TextIO

from .errors import ReportError
from .models import ConversionReport


def print_summary(destination: Path, pages: int, out: TextIO) -> None:
    print(f"Destination: {destination}", file=out)
    print(f"Pages: {pages}", file=out)


def render_json(report: ConversionReport) -> str:
    try:
        return json.dumps(report.to_dict(), ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as exc:
        raise ReportError(f"Error serializing report to JSON: {exc}") from exc


def emit_json(report: ConversionReport, out: TextIO) -> None:
    print(render_json(report), file=out)


__all__ = [
    "emit_json",
    "print_summary",
    "render_json",
]
