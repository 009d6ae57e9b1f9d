"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Buckets scanned records by content fingerprint using an injected Hasher.
"""

import logging
from collections import defaultdict
from typing import List, Callable, Optional

from ccdupe.core.errors import CcdupeError
from ccdupe.core.hasher import HasherImpl, Hasher
from ccdupe.core.interfaces import FingerprintGrouper
from ccdupe.core.models import FileRecord, FingerprintBucket

logger = logging.getLogger(__name__)


class FingerprintGrouperImpl(FingerprintGrouper):
    """
    A concrete implementation of FingerprintGrouper.
    Uses an injected Hasher instance for flexibility and testability.
    """

    def __init__(self, hasher: Hasher = None):
        self.hasher = hasher or HasherImpl()

    def bucket(
            self,
            records: List[FileRecord],
            stopped_flag: Optional[Callable[[], bool]] = None,
            progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> FingerprintBucket:
        """
        Fingerprint every comparable record and bucket paths by fingerprint.
        Singleton buckets are kept; records whose digest fails are dropped.
        Args:
            records: Records in scan order
            stopped_flag: Function that returns True if operation should be stopped
            progress_callback: Optional callback (stage, current, total)
        Returns:
            Dict[fingerprint, List[path]] with paths in scan order
        """
        buckets = defaultdict(list)
        candidates = [r for r in records if r.is_comparable]
        skipped_links = len(records) - len(candidates)
        if skipped_links:
            logger.debug(f"Excluded {skipped_links} unfollowed symlinks from fingerprinting")

        failed = 0
        total = len(candidates)
        for index, record in enumerate(candidates, 1):
            if stopped_flag and stopped_flag():
                return {}
            try:
                fingerprint = self.hasher.compute_fingerprint(record.path)
            except CcdupeError as e:
                logger.error(f"Error hashing {record.path}: {e}")
                failed += 1
                continue
            buckets[fingerprint].append(record.path)

            if progress_callback:
                progress_callback('fingerprinting', index, total)

        if failed:
            logger.warning(f"Skipped {failed} files due to hash computation errors")

        return dict(buckets)

    def group(self, records: List[FileRecord]) -> FingerprintBucket:
        """Buckets with at least two members; the only candidates worth verifying."""
        return self.drop_singletons(self.bucket(records))

    @staticmethod
    def drop_singletons(buckets: FingerprintBucket) -> FingerprintBucket:
        return {key: paths for key, paths in buckets.items() if len(paths) >= 2}
