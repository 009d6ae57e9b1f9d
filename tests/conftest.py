"""
Shared fixtures for duplicate-finder tests.
Creates isolated temporary directories with controlled test files.
"""
import os
import tempfile
from pathlib import Path
from typing import Dict

import pytest


def symlinks_supported(directory: Path) -> bool:
    probe = directory / ".probe_link"
    try:
        probe.symlink_to(directory)
    except (OSError, NotImplementedError):
        return False
    probe.unlink()
    return True


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def hello_world_tree(temp_dir) -> Dict[str, Path]:
    """
    The canonical scenario:
    - a.txt and b.txt both contain "hello" (duplicates)
    - c.txt contains "world" (unique, same size)
    """
    files = {
        "a": temp_dir / "a.txt",
        "b": temp_dir / "b.txt",
        "c": temp_dir / "c.txt",
    }
    files["a"].write_bytes(b"hello")
    files["b"].write_bytes(b"hello")
    files["c"].write_bytes(b"world")
    return files


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 3 identical files (one of them in a subdirectory)
    - 2 identical files of another content
    - 2 unique files
    - 2 empty files (identical, excluded whenever min size >= 1)
    """
    files = {}

    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.bin"
    files["dup2_b"] = temp_dir / "dup2_b.bin"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Same size as dup1 but different content in the last byte
    files["unique1"] = temp_dir / "unique1.txt"
    files["unique1"].write_bytes(b"A" * 1023 + b"Z")
    files["unique2"] = temp_dir / "unique2.txt"
    files["unique2"].write_bytes(b"D" * 2500)

    files["empty1"] = temp_dir / "empty1.txt"
    files["empty2"] = temp_dir / "empty2.txt"
    files["empty1"].write_bytes(b"")
    files["empty2"].write_bytes(b"")

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)  # Same as dup1_a/b

    return files


@pytest.fixture
def requires_symlinks(temp_dir):
    if not symlinks_supported(temp_dir):
        pytest.skip("Symlinks not supported on this platform")


@pytest.fixture
def requires_posix():
    if os.name != "posix":
        pytest.skip("POSIX-only behaviour")
