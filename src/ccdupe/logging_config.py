"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

logging_config.py
Process-wide logging setup for the CLI and the web server.

Core modules only ever call `logging.getLogger(__name__)`; handlers are installed
here, once, by the entry point.
"""
import logging
import os
from typing import Optional

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"
FILE_LOG_FORMAT = "%(asctime)s " + LOG_FORMAT
DEFAULT_LOG_FILE = "ccdupe.log"


def setup_logging(level: int = logging.ERROR, log_file: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Threshold for the stderr handler.
        log_file: Optional path; when given, INFO and above are appended to it
                  regardless of the console level.
    """
    handlers = []

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    handlers.append(console)

    root_level = level
    if log_file:
        try:
            file_handler = logging.FileHandler(os.path.expanduser(log_file), mode="a", encoding="utf-8")
        except OSError as e:
            logging.getLogger(__name__).error(f"Error opening log file {log_file}: {e}")
        else:
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
            handlers.append(file_handler)
            root_level = min(level, logging.INFO)

    logging.basicConfig(level=root_level, handlers=handlers, force=True)
