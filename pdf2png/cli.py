from __future__ import annotations

import logging
import sys
from typing import Sequence, TextIO

from .config import log_level_from_env, resolve_config
from .constants import LOG_FORMAT
from .errors import Pdf2PngError
from .pipeline import convert


logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Run one conversion and return the process exit code."""
    if out is None:
        out = sys.stdout
    try:
        config = resolve_config(argv)
    except Pdf2PngError as exc:
        logger.error("%s", exc)
        return 1

    try:
        report = convert(config, out, progress_callback=logger.info)
    except Pdf2PngError as exc:
        logger.error("%s", exc)
        return 1
    except OSError as exc:
        logger.error("Error: %s", exc)
        return 1
    except Exception:
        logger.exception("Unhandled error while converting %s", config.source)
        return 1

    if report.ok:
        logger.info("All %d page(s) converted.", len(report.rendered))
    else:
        logger.warning(
            "%d of %d page(s) converted, %d failed.",
            len(report.rendered),
            report.pages,
            len(report.errors),
        )
    return 0


def run() -> None:
    logging.basicConfig(level=log_level_from_env(), format=LOG_FORMAT)
    sys.exit(main())
