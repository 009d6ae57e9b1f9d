"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements directory scanning for the duplicate finder.
Features:
- Recursively scans directories in lexical order (reproducible output)
- Optionally follows symlinks to their terminal target
- Applies the minimum size filter (inclusive)
- Skips unreadable entries without aborting; only the root is fatal
"""

import os
import stat
import time
import logging
from typing import List, Optional, Callable

from ccdupe.core.errors import (
    AccessDeniedError,
    BrokenLinkError,
    CcdupeError,
    InvalidRootError,
    LinkCycleError,
    NotFoundError,
)
from ccdupe.core.interfaces import FileScanner
from ccdupe.core.models import FileRecord, ScanParams
from ccdupe.core.resolver import resolve

logger = logging.getLogger(__name__)


class FileScannerImpl(FileScanner):
    """
    Scans a directory tree and returns one FileRecord per regular file
    (or symlink) that passes the size filter.

    Attributes:
        root_dir: Root directory to scan
        min_size: Minimum file size in bytes (inclusive)
        follow_symlinks: Resolve symlinks and record their target's size
    """

    # Progress throttling: update every N entries to reduce overhead
    PROGRESS_INTERVAL = 5000

    def __init__(self, root_dir: str, min_size: int = 0, follow_symlinks: bool = False):
        self.root_dir = root_dir
        self.min_size = min_size or 0
        self.follow_symlinks = follow_symlinks

    @classmethod
    def from_params(cls, params: ScanParams) -> 'FileScannerImpl':
        return cls(
            root_dir=params.root_dir,
            min_size=params.min_size_bytes,
            follow_symlinks=params.follow_symlinks,
        )

    def scan(self,
             stopped_flag: Optional[Callable[[], bool]] = None,
             progress_callback: Optional[Callable[[str, int, object], None]] = None) -> List[FileRecord]:
        """
        Single-pass scanner with throttled progress updates.
        Returns the records found in the directory tree, in traversal order.
        """
        logger.info(f"Scan started: {self.root_dir}")
        logger.debug(f"Filters: min_size={self.min_size}, follow_symlinks={self.follow_symlinks}")

        self._check_root()

        found: List[FileRecord] = []
        processed = 0
        progress_counter = 0
        start_time = time.time()

        for root, dirs, files in os.walk(self.root_dir, onerror=self._on_walk_error):
            if stopped_flag and stopped_flag():
                logger.debug("Scan interrupted by user")
                return []

            dirs.sort()
            # Symlinked directories are entries, not subtrees; os.walk does not descend into them
            entries = sorted(files + [d for d in dirs if os.path.islink(os.path.join(root, d))])

            for name in entries:
                record = self._process_entry(os.path.join(root, name))
                if record is not None:
                    found.append(record)
                processed += 1
                progress_counter += 1

                if progress_callback and progress_counter >= self.PROGRESS_INTERVAL:
                    progress_callback('scanning', processed, None)
                    progress_counter = 0

        # Final update for small datasets
        if progress_callback and progress_counter > 0:
            progress_callback('scanning', processed, None)

        elapsed = time.time() - start_time
        logger.info(f"Scan finished: {processed} entries visited, {len(found)} records kept "
                    f"in {elapsed:.2f}s")
        return found

    def _check_root(self) -> None:
        """Failure to access the root is the only fatal scan error."""
        try:
            st = os.stat(self.root_dir)
        except FileNotFoundError as e:
            raise NotFoundError(f"Directory does not exist: {self.root_dir}", self.root_dir) from e
        except PermissionError as e:
            raise AccessDeniedError(f"Permission denied: {self.root_dir}", self.root_dir) from e
        except OSError as e:
            raise InvalidRootError(f"Cannot access {self.root_dir}: {e}", self.root_dir) from e

        if not stat.S_ISDIR(st.st_mode):
            raise InvalidRootError(f"Not a directory: {self.root_dir}", self.root_dir)
        if not os.access(self.root_dir, os.R_OK | os.X_OK):
            raise AccessDeniedError(f"Permission denied: {self.root_dir}", self.root_dir)

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        logger.error(f"Skipping unreadable directory {error.filename}: {error.strerror}")

    def _process_entry(self, path: str) -> Optional[FileRecord]:
        """
        Build a FileRecord for one non-directory entry, or None if it is skipped.
        """
        try:
            st = os.lstat(path)
        except OSError as e:
            logger.error(f"Could not stat {path}: {e}")
            return None

        if stat.S_ISLNK(st.st_mode):
            record = self._process_link(path, st)
        elif stat.S_ISREG(st.st_mode):
            record = FileRecord(path=path, size=st.st_size)
        else:
            logger.debug(f"Skipping special file: {path}")
            return None

        if record is None:
            return None

        if record.size < self.min_size:
            logger.debug(f"Skipping {path} (size {record.size} < {self.min_size})")
            return None

        return record

    def _process_link(self, path: str, link_stat: os.stat_result) -> Optional[FileRecord]:
        if not self.follow_symlinks:
            try:
                link_text = os.readlink(path)
            except OSError as e:
                logger.error(f"Could not read symlink {path}: {e}")
                return None
            return FileRecord(path=path, size=link_stat.st_size, is_link=True, link_target=link_text)

        try:
            target = resolve(path)
        except (BrokenLinkError, LinkCycleError) as e:
            logger.error(f"Skipping symlink: {e}")
            return None
        except CcdupeError as e:
            logger.error(f"Could not resolve symlink {path}: {e}")
            return None

        try:
            target_stat = os.stat(target)
        except OSError as e:
            logger.error(f"Could not stat symlink target {target} of {path}: {e}")
            return None

        if not stat.S_ISREG(target_stat.st_mode):
            logger.debug(f"Skipping symlink {path}: target {target} is not a regular file")
            return None

        return FileRecord(
            path=path,
            size=target_stat.st_size,
            is_link=True,
            link_target=target,
            followed=True,
        )
