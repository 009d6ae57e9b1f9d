"""
Unified command orchestrator for duplicate detection.
This is the SINGLE source of truth for the scan pipeline — used by both the CLI and the HTTP API.
"""
import logging
import time
from typing import Optional, Callable, List

from ccdupe.core.comparator import FileComparatorImpl
from ccdupe.core.grouper import FingerprintGrouperImpl
from ccdupe.core.hasher import HasherImpl, algorithm_for
from ccdupe.core.models import ScanParams, ScanResult, DuplicateGroup
from ccdupe.core.scanner import FileScannerImpl
from ccdupe.core.verifier import DuplicateVerifierImpl

logger = logging.getLogger(__name__)


class DuplicateScanCommand:
    """
    Orchestrates the whole pipeline for one ScanParams value:
    1. Scan the directory tree
    2. Bucket records by fingerprint
    3. Verify each bucket byte-by-byte

    Each call builds its own stages from the params, so concurrent commands
    (e.g. parallel HTTP requests) never share configuration.

    Usage:
        params = ScanParams(root_dir="/data", min_size_bytes=1)
        result = DuplicateScanCommand().execute(params)
    """

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
            stopped_flag: Optional[Callable[[], bool]] = None
    ) -> ScanResult:
        """
        Execute the scan with given parameters.

        Raises:
            NotFoundError / AccessDeniedError / InvalidRootError: the root cannot be scanned
        """
        start = time.time()
        logger.info(f"Duplicate scan started: {params.root_dir} "
                    f"(min_size={params.min_size_bytes}, follow_symlinks={params.follow_symlinks}, "
                    f"hash={params.hash_algorithm.value})")

        scanner = FileScannerImpl.from_params(params)
        records = scanner.scan(stopped_flag=stopped_flag, progress_callback=progress_callback)

        grouper = FingerprintGrouperImpl(
            HasherImpl(algorithm_for(params.hash_algorithm), chunk_size=params.chunk_size)
        )
        buckets = grouper.bucket(records, stopped_flag=stopped_flag, progress_callback=progress_callback)
        total_files = sum(len(paths) for paths in buckets.values())
        candidates = grouper.drop_singletons(buckets)

        verifier = DuplicateVerifierImpl(FileComparatorImpl(chunk_size=params.chunk_size))
        groups: List[DuplicateGroup] = []
        for index, (fingerprint, paths) in enumerate(candidates.items(), 1):
            if stopped_flag and stopped_flag():
                logger.debug("Verification interrupted by user")
                break
            groups.extend(verifier.verify(paths, fingerprint))
            if progress_callback:
                progress_callback('verifying', index, len(candidates))

        result = ScanResult(groups=tuple(groups), total_files=total_files)
        logger.info(f"Duplicate scan finished: {result.total_files} files, {len(result.groups)} groups, "
                    f"{result.total_duplicates} duplicates in {time.time() - start:.2f}s")
        return result
