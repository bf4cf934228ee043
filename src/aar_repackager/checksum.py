"""MD5/SHA-1 digests and Maven checksum sidecar files."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import NamedTuple

from aar_repackager.exceptions import RepackageIOError


CHUNK_SIZE = 64 * 1024
SIDECAR_ALGORITHMS = ("md5", "sha1")


class Checksums(NamedTuple):
    md5: str
    sha1: str


def file_digest(path: str | Path, algorithm: str) -> str:
    """Hash a file's full contents.

    Args:
        path: File to hash.
        algorithm: A `hashlib` algorithm name, e.g. "md5" or "sha1".

    Raises:
        RepackageIOError: If the file cannot be read.

    Returns:
        Lowercase hex digest without separators.
    """
    digest = hashlib.new(algorithm)
    try:
        with open(path, "rb") as f:
            for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
                digest.update(chunk)
    except OSError as exc:
        raise RepackageIOError(f"Failed to read {path} for {algorithm} checksum") from exc
    return digest.hexdigest()


def compute_checksums(path: str | Path) -> Checksums:
    return Checksums(md5=file_digest(path, "md5"), sha1=file_digest(path, "sha1"))


def sidecar_path(path: str | Path, algorithm: str) -> Path:
    p = Path(path)
    return p.with_name(f"{p.name}.{algorithm}")


def write_checksum_sidecars(path: str | Path) -> Checksums:
    """Write `<path>.md5` and `<path>.sha1` next to a file.

    Each sidecar holds only the hex digest as ASCII: no filename and no
    trailing newline.

    Raises:
        RepackageIOError: If hashing or writing fails.

    Returns:
        The digests that were written.
    """
    checksums = compute_checksums(path)
    for algorithm, value in zip(SIDECAR_ALGORITHMS, checksums):
        target = sidecar_path(path, algorithm)
        try:
            target.write_bytes(value.encode("ascii"))
        except OSError as exc:
            raise RepackageIOError(f"Failed to write checksum file {target}") from exc
    return checksums
