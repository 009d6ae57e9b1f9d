"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception hierarchy for scanning, comparing and deleting files.

Per-file errors (AccessDeniedError, NotFoundError, BrokenLinkError, LinkCycleError,
ReadError) are caught by the pipeline, logged and the offending entry is skipped.
Only errors on the scan root itself are allowed to abort a scan.
"""
import errno
from typing import Optional


class CcdupeError(Exception):
    """Base class for all errors raised by the duplicate finder."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class AccessDeniedError(CcdupeError):
    """Permission denied while reading, stat'ing or deleting a file."""


class NotFoundError(CcdupeError):
    """File vanished between scan and use (or never existed)."""


class BrokenLinkError(CcdupeError):
    """A symlink in the resolution chain is missing or unreadable."""


class LinkCycleError(CcdupeError):
    """Symlink resolution exceeded the hop limit."""


class ReadError(CcdupeError):
    """I/O failure that is not explained by a clean end of file."""


class MarshalError(CcdupeError):
    """Structured output could not be serialized."""


class InvalidRootError(CcdupeError):
    """Scan root exists but is not a directory."""


def translate_os_error(exc: OSError, path: Optional[str] = None) -> CcdupeError:
    """
    Map an OSError to the matching CcdupeError subclass.
    The original exception is kept as __cause__ by callers using `raise ... from exc`.
    """
    path = path or exc.filename
    if isinstance(exc, FileNotFoundError) or exc.errno == errno.ENOENT:
        return NotFoundError(f"File not found: {path}", path)
    if isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM):
        return AccessDeniedError(f"Permission denied: {path}", path)
    return ReadError(f"I/O error on {path}: {exc.strerror or exc}", path)
