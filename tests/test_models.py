from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from pdf2png.errors import ReportError
from pdf2png.fs import page_image_path
from pdf2png.models import ConversionReport, PageError
from pdf2png.report import emit_json, print_summary, render_json


def test_empty_fields_are_omitted():
    report = ConversionReport(source="doc.pdf", pages=3)
    assert report.to_dict() == {"source": "doc.pdf", "pages": 3}


def test_author_and_errors_are_included():
    report = ConversionReport(source="doc.pdf", pages=2, author="Ada")
    report.add_error(2, "Error getting page 2: boom")

    assert report.to_dict() == {
        "source": "doc.pdf",
        "pages": 2,
        "author": "Ada",
        "errors": [{"page_num": 2, "reason": "Error getting page 2: boom"}],
    }
    assert not report.ok


def test_rendered_paths_are_not_serialized():
    report = ConversionReport(source="doc.pdf", pages=1)
    report.rendered.append(Path("page_1.png"))
    assert "rendered" not in report.to_dict()


def test_page_error_is_immutable():
    error = PageError(page_num=1, reason="x")
    with pytest.raises(AttributeError):
        error.page_num = 2  # type: ignore[misc]


def test_render_json_uses_two_space_indent():
    report = ConversionReport(source="doc.pdf", pages=1)
    text = render_json(report)
    assert text == '{\n  "source": "doc.pdf",\n  "pages": 1\n}'


def test_emit_json_and_summary():
    buffer = io.StringIO()
    report = ConversionReport(source="doc.pdf", pages=4, author="Ünïcode")

    print_summary(Path("/tmp/out"), 4, buffer)
    emit_json(report, buffer)

    lines = buffer.getvalue().split("\n", 2)
    assert lines[0] == f"Destination: {Path('/tmp/out')}"
    assert lines[1] == "Pages: 4"
    assert json.loads(lines[2])["author"] == "Ünïcode"


def test_page_image_path_is_not_padded(tmp_path):
    assert page_image_path(tmp_path, 1) == tmp_path / "page_1.png"
    assert page_image_path(tmp_path, 12) == tmp_path / "page_12.png"
    with pytest.raises(ValueError):
        page_image_path(tmp_path, 0)


def test_unserializable_report_raises_report_error():
    report = ConversionReport(source="doc.pdf", pages=1, author=object())  # type: ignore[arg-type]
    with pytest.raises(ReportError, match="serializing"):
        render_json(report)
