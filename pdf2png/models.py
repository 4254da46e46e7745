from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class RunConfig:
    source: Path
    destination: Path
    width: int
    json_output: bool = False


@dataclass(frozen=True)
class PageError:
    page_num: int
    reason: str

    def to_dict(self) -> dict:
        return {
            "page_num": self.page_num,
            "reason": self.reason,
        }


@dataclass
class ConversionReport:
    """
    Outcome of one conversion run.

    Errors are kept in the order pages were scanned; `rendered` holds the image
    paths written successfully and is not part of the serialized form.
    """

    source: str
    pages: int
    author: str | None = None
    errors: list[PageError] = field(default_factory=list)
    rendered: list[Path] = field(default_factory=list)

    def add_error(self, page_num: int, reason: str) -> PageError:
        error = PageError(page_num=page_num, reason=reason)
        self.errors.append(error)
        return error

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        data: dict[str, object] = {
            "source": self.source,
            "pages": self.pages,
        }
        if self.author:
            data["author"] = self.author
        if self.errors:
            data["errors"] = [error.to_dict() for error in self.errors]
        return data
