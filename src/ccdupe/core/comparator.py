"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparator.py
Byte-exact file comparison with bounded memory.

Both files are read in lock-step, one fixed-size chunk at a time, so memory use
does not depend on file size. This is the most expensive step of the pipeline and
is only ever run inside a fingerprint bucket.
"""

import os
import logging

from ccdupe.core.errors import translate_os_error
from ccdupe.core.interfaces import FileComparator
from ccdupe.core.models import DEFAULT_CHUNK_SIZE

logger = logging.getLogger(__name__)


class FileComparatorImpl(FileComparator):
    """
    Streams two files side by side and reports whether they are byte-identical.

    A length mismatch is a normal "not identical" answer. Open or read failures
    are raised as NotFoundError / AccessDeniedError / ReadError.
    """

    def __init__(self, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.chunk_size = chunk_size

    def identical(self, path_a: str, path_b: str) -> bool:
        try:
            with open(path_a, 'rb') as fa, open(path_b, 'rb') as fb:
                # Cheap length check first; content is still compared in full below
                if os.fstat(fa.fileno()).st_size != os.fstat(fb.fileno()).st_size:
                    return False
                return self._compare_streams(fa, fb)
        except OSError as e:
            raise translate_os_error(e) from e

    def _compare_streams(self, fa, fb) -> bool:
        while True:
            chunk_a = self._read_chunk(fa)
            chunk_b = self._read_chunk(fb)

            if chunk_a != chunk_b:
                # Covers both differing bytes and one stream ending early
                return False
            if not chunk_a:
                return True

    def _read_chunk(self, stream) -> bytes:
        """
        Read up to chunk_size bytes, retrying short reads so that chunk boundaries
        line up in both streams. Returns fewer bytes only at end of file.
        """
        data = stream.read(self.chunk_size)
        if not data or len(data) == self.chunk_size:
            return data

        parts = [data]
        remaining = self.chunk_size - len(data)
        while remaining > 0:
            more = stream.read(remaining)
            if not more:
                break
            parts.append(more)
            remaining -= len(more)
        return b''.join(parts)
