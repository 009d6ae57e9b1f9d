"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/resolver.py
Follows a chain of symbolic links to its terminal, non-link entry.
"""

import os
import stat
import logging

from ccdupe.core.errors import BrokenLinkError, LinkCycleError, translate_os_error

logger = logging.getLogger(__name__)

MAX_LINK_HOPS = 40  # Linux MAXSYMLINKS


def resolve(path: str, max_hops: int = MAX_LINK_HOPS) -> str:
    """
    Resolve `path` to the first entry in its link chain that is not a symlink.

    Relative link targets are resolved against the directory containing the link.
    Returns an absolute, normalized path.

    Raises:
        NotFoundError / AccessDeniedError: `path` itself cannot be stat'ed.
        BrokenLinkError: a link in the chain points to a missing or unreadable entry.
        LinkCycleError: more than `max_hops` links were followed.
    """
    current = os.path.abspath(path)
    hops = 0

    while True:
        try:
            st = os.lstat(current)
        except OSError as e:
            if hops == 0:
                raise translate_os_error(e, current) from e
            raise BrokenLinkError(f"Broken symlink {path}: {current} is unreachable", path) from e

        if not stat.S_ISLNK(st.st_mode):
            return current

        if hops >= max_hops:
            raise LinkCycleError(f"Too many levels of symbolic links: {path}", path)

        try:
            target = os.readlink(current)
        except OSError as e:
            raise BrokenLinkError(f"Cannot read symlink {current}: {e}", path) from e

        if not os.path.isabs(target):
            target = os.path.join(os.path.dirname(current), target)

        logger.debug(f"Link hop {hops + 1}: {current} -> {target}")
        current = os.path.normpath(target)
        hops += 1
