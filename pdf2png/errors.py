from __future__ import annotations


class Pdf2PngError(RuntimeError):
    """Base class for errors that abort a conversion run."""


class ConfigError(Pdf2PngError):
    """Command-line arguments are missing or invalid."""


class DocumentError(Pdf2PngError):
    """The source could not be parsed or its page count could not be read."""


class ReportError(Pdf2PngError):
    """The conversion report could not be serialized."""


__all__ = [
    "ConfigError",
    "DocumentError",
    "Pdf2PngError",
    "ReportError",
]
