"""Zip the staged repository tree and remove the staging directory."""

from __future__ import annotations

import shutil
import zipfile
from pathlib import Path

from aar_repackager.exceptions import RepackageIOError
from aar_repackager.layout import archive_path_for


def zip_directory(directory: str | Path) -> Path:
    """Pack a directory into `<directory>.zip` using deflate compression.

    Entry names are relative to `directory` itself and use `/` separators.
    Every subdirectory gets its own entry; entries are written in sorted order.

    Args:
        directory: Staging directory to pack.

    Raises:
        RepackageIOError: If the directory cannot be read or the archive written.

    Returns:
        Path of the written archive.
    """
    root = Path(directory)
    if not root.is_dir():
        raise RepackageIOError(f"Staging directory not found: {root}")

    out = archive_path_for(root)
    try:
        with zipfile.ZipFile(out, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for path in sorted(root.rglob("*")):
                zf.write(path, path.relative_to(root).as_posix())
    except OSError as exc:
        out.unlink(missing_ok=True)
        raise RepackageIOError(f"Failed to create archive {out}") from exc
    return out


def remove_tree(directory: str | Path) -> None:
    try:
        shutil.rmtree(directory)
    except OSError as exc:
        raise RepackageIOError(f"Failed to remove staging directory {directory}") from exc


def pack_and_clean(directory: str | Path) -> Path:
    """Zip the staging directory, then delete it.

    The staging tree is only removed once the archive has been written; if
    packing fails it is left on disk.
    """
    archive = zip_directory(directory)
    remove_tree(directory)
    return archive
