"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/verifier.py
Confirms duplicates inside one fingerprint bucket by byte-exact comparison.

A shared fingerprint only makes files candidates. Each path is compared against
the members of the groups built so far and joins the first group in which some
member is confirmed identical; otherwise it starts a new group. A clean
"different" answer from one member rules out its whole group. When a
comparison fails, the next member of the same group is tried instead. Singleton groups
are discarded.
"""

import logging
from typing import List, Optional

from ccdupe.core.comparator import FileComparatorImpl
from ccdupe.core.errors import CcdupeError
from ccdupe.core.interfaces import DuplicateVerifier, FileComparator
from ccdupe.core.models import DuplicateGroup

logger = logging.getLogger(__name__)


class DuplicateVerifierImpl(DuplicateVerifier):

    def __init__(self, comparator: FileComparator = None):
        self.comparator = comparator or FileComparatorImpl()

    def verify(self, bucket: List[str], fingerprint: str) -> List[DuplicateGroup]:
        clusters: List[List[str]] = []
        seen = set()

        for path in bucket:
            if path in seen:
                logger.debug(f"Ignoring repeated path in bucket: {path}")
                continue
            seen.add(path)

            target = self._find_cluster(path, clusters)
            if target is None:
                clusters.append([path])
            else:
                target.append(path)

        groups = [
            DuplicateGroup(paths=tuple(members), fingerprint=fingerprint)
            for members in clusters if len(members) >= 2
        ]

        if len(clusters) > 1:
            logger.warning(f"Bucket {fingerprint} split into {len(clusters)} clusters "
                           f"(fingerprint collision or unreadable files)")
        return groups

    def _find_cluster(self, path: str, clusters: List[List[str]]) -> Optional[List[str]]:
        for members in clusters:
            for member in members:
                outcome = self._compare(member, path)
                if outcome is None:
                    continue  # try another member of the same cluster
                if outcome:
                    return members
                break  # cleanly different: no member of this cluster can match
        return None

    def _compare(self, path_a: str, path_b: str) -> Optional[bool]:
        """True/False for a completed comparison, None when it failed."""
        try:
            return self.comparator.identical(path_a, path_b)
        except CcdupeError as e:
            logger.error(f"Error comparing files {path_a} and {path_b}: {e}")
            return None
