"""
Core duplicate-detection engine — resolver, scanner, hasher, grouper, comparator and verifier.

This package contains the I/O-bound foundation of ccdupe:
- resolve: follows symlink chains with a hop limit
- FileScannerImpl: recursive directory traversal with size and symlink handling
- HasherImpl + XXHashAlgorithmImpl / MD5AlgorithmImpl: streaming content fingerprints
- FingerprintGrouperImpl: buckets candidates by fingerprint
- FileComparatorImpl: chunked byte-exact comparison
- DuplicateVerifierImpl: turns buckets into verified duplicate groups
- Models: FileRecord, DuplicateGroup, ScanResult and ScanParams

All components are pure Python with no UI dependencies — suitable for CLI and server usage.
"""

from .resolver import resolve
from .scanner import FileScannerImpl
from .hasher import HasherImpl, XXHashAlgorithmImpl, MD5AlgorithmImpl, algorithm_for
from .grouper import FingerprintGrouperImpl
from .comparator import FileComparatorImpl
from .verifier import DuplicateVerifierImpl
from .models import (
    FileRecord, DuplicateGroup, ScanResult, ScanParams, HashAlgorithmName,
    Choice, ResolutionReport)

__all__ = [
    "resolve",
    "FileScannerImpl",
    "HasherImpl",
    "XXHashAlgorithmImpl",
    "MD5AlgorithmImpl",
    "algorithm_for",
    "FingerprintGrouperImpl",
    "FileComparatorImpl",
    "DuplicateVerifierImpl",
    "FileRecord",
    "DuplicateGroup",
    "ScanResult",
    "ScanParams",
    "HashAlgorithmName",
    "Choice",
    "ResolutionReport",
]
