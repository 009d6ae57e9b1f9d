"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for scanning, fingerprinting and duplicate resolution.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Tuple, FrozenSet, Union
from enum import Enum

from ccdupe.utils.convert_utils import ConvertUtils


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Digest used to bucket files before byte-by-byte verification.
    """
    XXHASH = "xxhash"
    MD5 = "md5"

    def __repr__(self) -> str:
        return self.value


class Choice(Enum):
    """Answer to a pairwise 'which file should be deleted?' prompt."""
    DELETE_FIRST = "1"
    DELETE_SECOND = "2"
    KEEP_BOTH = "3"


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    A single non-directory entry found by the scanner.

    For a followed symlink, `path` is the link itself, `size` is the size of the
    terminal target and `link_target` is the resolved target path.
    For an unfollowed symlink, `size` is the link's own size and `link_target`
    is the raw link text.
    """
    path: str
    size: int  # in bytes
    is_link: bool = False
    link_target: Optional[str] = None
    followed: bool = False

    @property
    def is_comparable(self) -> bool:
        """Unfollowed links are never fingerprinted: their content is not the target's."""
        return not self.is_link or self.followed

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}>"


# fingerprint (hex) -> paths in scan order
FingerprintBucket = Dict[str, List[str]]


@dataclass(frozen=True)
class DuplicateGroup:
    """
    A verified set of byte-identical files sharing one fingerprint.
    Paths are unique and kept in scan order.
    """
    paths: Tuple[str, ...]
    fingerprint: str

    def __post_init__(self):
        if len(self.paths) < 2:
            raise ValueError("A duplicate group needs at least two files")
        if len(set(self.paths)) != len(self.paths):
            raise ValueError("A duplicate group cannot list the same path twice")

    @property
    def path_set(self) -> FrozenSet[str]:
        return frozenset(self.paths)

    def to_dict(self) -> Dict[str, object]:
        return {"files": list(self.paths), "hash": self.fingerprint}

    def __repr__(self):
        return f"<DuplicateGroup hash={self.fingerprint}, count={len(self.paths)}>"


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of one scan: all verified groups plus the number of files that were
    successfully fingerprinted.
    """
    groups: Tuple[DuplicateGroup, ...] = ()
    total_files: int = 0

    @property
    def total_duplicates(self) -> int:
        """Number of files implicated in duplication (all members of all groups)."""
        return sum(len(g.paths) for g in self.groups)

    def to_dict(self) -> Dict[str, object]:
        return {
            "duplicate_groups": [g.to_dict() for g in self.groups],
            "total_files": self.total_files,
            "total_duplicates": self.total_duplicates,
        }


@dataclass
class ResolutionReport:
    """Outcome of an interactive resolution session."""
    prompts: int = 0
    deleted: List[str] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)

    def summary(self) -> str:
        lines = [f"Pairs reviewed: {self.prompts}", f"Files deleted: {len(self.deleted)}"]
        if self.failed:
            lines.append(f"Failed deletions: {len(self.failed)}")
        return "\n".join(lines)


"""
Per-call scan configuration with built-in validation.
Interface-agnostic — built by both the CLI and the HTTP API for every invocation.
"""

DEFAULT_CHUNK_SIZE = 64 * 1024  # lock-step comparison and hashing read size


@dataclass(frozen=True)
class ScanParams:
    """Parameters for one scan-and-verify run."""
    root_dir: str
    min_size_bytes: int = 0
    follow_symlinks: bool = False
    hash_algorithm: HashAlgorithmName = HashAlgorithmName.XXHASH
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.min_size_bytes < 0:
            raise ValueError("Minimum size cannot be negative")

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")

        if not isinstance(self.hash_algorithm, HashAlgorithmName):
            raise ValueError(f"Unknown hash algorithm: {self.hash_algorithm!r}")

    @staticmethod
    def from_human_readable(
            root_dir: str,
            min_size: Union[str, int, None] = "0",
            follow_symlinks: bool = False,
            hash_algorithm: HashAlgorithmName = HashAlgorithmName.XXHASH,
    ) -> 'ScanParams':
        """
        Factory method to create params from human-readable inputs.
        Used by both the CLI (`--minsize`) and the HTTP API (`minSize`); a missing
        size means no minimum. Hash aliases are resolved by the caller.
        Raises ValueError for an invalid size or any other invalid parameter.
        """
        return ScanParams(
            root_dir=root_dir,
            min_size_bytes=ConvertUtils.human_to_bytes(min_size) if min_size is not None else 0,
            follow_symlinks=follow_symlinks,
            hash_algorithm=hash_algorithm,
        )
