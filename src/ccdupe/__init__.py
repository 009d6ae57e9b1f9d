"""
ccdupe — find byte-identical files and remove redundant copies.

Core features:
- Scan → fingerprint → byte-by-byte verification; a shared hash is never proof of equality
- Optional symlink following with cycle protection
- Interactive pairwise deletion, JSON report, or a small HTTP API
- Deletion is permanent by default, or to the system trash (via send2trash)
"""

from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("ccdupe")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from ccdupe.commands import DuplicateScanCommand
from ccdupe.core import ScanParams, ScanResult, DuplicateGroup, FileRecord, HashAlgorithmName
from ccdupe.services.file_service import FileService
from ccdupe.utils.convert_utils import ConvertUtils

__all__ = [
    "DuplicateScanCommand",
    "ScanParams",
    "ScanResult",
    "DuplicateGroup",
    "FileRecord",
    "HashAlgorithmName",
    "FileService",
    "ConvertUtils",
    "__version__",
]
