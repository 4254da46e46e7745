from __future__ import annotations


DEFAULT_DESTINATION = "."
DEFAULT_WIDTH = 400

PAGE_FILENAME_TEMPLATE = "page_{page_num}.png"

LOG_LEVEL_ENV = "PDF2PNG_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
