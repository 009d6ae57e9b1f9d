"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements file fingerprinting with pluggable hash algorithms.

HasherImpl streams the whole file through the configured algorithm in fixed-size
chunks and returns a hex digest. Fingerprints are only used to bucket candidates;
equality is always confirmed byte-by-byte afterwards.
"""

import hashlib
import logging

import xxhash

from ccdupe.core.errors import translate_os_error
from ccdupe.core.interfaces import Hasher, HashAlgorithm, Digest
from ccdupe.core.models import HashAlgorithmName, DEFAULT_CHUNK_SIZE

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> Digest:
        return xxhash.xxh64()


class MD5AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> Digest:
        return hashlib.md5()


ALGORITHMS = {
    HashAlgorithmName.XXHASH: XXHashAlgorithmImpl,
    HashAlgorithmName.MD5: MD5AlgorithmImpl,
}


def algorithm_for(name: HashAlgorithmName) -> HashAlgorithm:
    """Return the algorithm implementation registered for `name`."""
    try:
        return ALGORITHMS[name]()
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {name!r}")


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        self.algorithm = algorithm or XXHashAlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_fingerprint(self, path: str) -> str:
        """
        Computes the hex digest of the full content of `path`.
        Raises NotFoundError / AccessDeniedError / ReadError on failure.
        """
        digest = self.algorithm.new()
        try:
            with open(path, 'rb') as f:
                for chunk in iter(lambda: f.read(self.chunk_size), b''):
                    digest.update(chunk)
        except OSError as e:
            raise translate_os_error(e, path) from e
        return digest.hexdigest()
