"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate finder.
These protocols enforce structural typing using Python's `typing.Protocol` so the
pipeline stages can be swapped out in tests and reused by the CLI and the HTTP API.

Key Components:
---------------
- HashAlgorithm: Factory for incremental digest objects (xxHash, MD5, ...).
- Hasher: Computes the content fingerprint of a file.
- FileScanner: Walks a directory tree and returns FileRecords.
- FingerprintGrouper: Buckets records by fingerprint.
- FileComparator: Byte-exact comparison of two files.
- DuplicateVerifier: Turns a fingerprint bucket into verified duplicate groups.
- ResolutionHandler: Capability used by the interactive resolution driver
  (present a choice, delete a file, report an error).
"""

from typing import Protocol, List, Optional, Callable
from ccdupe.core.models import (
    Choice,
    DuplicateGroup,
    FileRecord,
    FingerprintBucket,
)


# ===== Interfaces =====

class Digest(Protocol):
    """Incremental digest object (the hashlib/xxhash object API)."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like MD5 or xxHash
    without affecting the rest of the pipeline.
    """

    @staticmethod
    def new() -> Digest:
        """Returns a fresh incremental digest object."""
        ...


class Hasher(Protocol):
    """Interface for fingerprinting the full content of a file."""
    def compute_fingerprint(self, path: str) -> str: ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting file metadata.
    """
    def scan(
        self,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> List[FileRecord]:
        """
        Scan files from the configured directory.

        Args:
            stopped_flag: Function that returns True if operation should be canceled.
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            FileRecords in traversal order that passed the size filter.
        """
        ...


class FingerprintGrouper(Protocol):
    """
    Interface for bucketing records by content fingerprint.
    """
    def bucket(self, records: List[FileRecord]) -> FingerprintBucket:
        """All buckets, including those with a single member."""
        ...

    def group(self, records: List[FileRecord]) -> FingerprintBucket:
        """Buckets with at least two members."""
        ...


class FileComparator(Protocol):
    """Byte-exact comparison of two files."""
    def identical(self, path_a: str, path_b: str) -> bool: ...


class DuplicateVerifier(Protocol):
    """
    Interface for confirming duplicates inside one fingerprint bucket.
    """
    def verify(self, bucket: List[str], fingerprint: str) -> List[DuplicateGroup]:
        """
        Args:
            bucket: Paths sharing one fingerprint, in scan order.
            fingerprint: The shared fingerprint, copied into every group.

        Returns:
            Zero or more groups of pairwise byte-identical files.
        """
        ...


class ResolutionHandler(Protocol):
    """
    Capability interface for resolving duplicates.
    Implemented by the terminal prompt; tests provide scripted versions.
    """
    def choose(self, first: str, second: str) -> Choice:
        """Ask which of two identical files should be deleted."""
        ...

    def delete(self, path: str) -> None:
        """Delete a file. Raises CcdupeError on failure."""
        ...

    def report_error(self, message: str) -> None:
        """Show a non-fatal error to the user."""
        ...
