"""Maven repository path building."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from aar_repackager.models import GAV


ARCHIVE_SUFFIX = ".zip"
METADATA_FILENAME = "maven-metadata.xml"


class RepositoryLayout(BaseModel):
    """Directories of one artifact coordinate inside a Maven repository.

    Attributes:
        root: Repository root (the staging directory).
        metadata_dir: `<root>/<group path>/<artifactId>`, holds maven-metadata.xml.
        version_dir: `<metadata_dir>/<version>`, holds the artifact, POM and sources.
    """

    model_config = ConfigDict(frozen=True)

    root: Path
    metadata_dir: Path
    version_dir: Path

    @property
    def metadata_file(self) -> Path:
        return self.metadata_dir / METADATA_FILENAME

    def relative(self, path: Path) -> Path:
        """Return `path` relative to the repository root."""
        return path.relative_to(self.root)


def strip_zip_suffix(output: str | Path) -> Path:
    """Drop a trailing `.zip` from the output path.

    The packer appends the suffix again, so `out.zip` and `out` stage into the
    same directory and produce the same archive.
    """
    text = str(output)
    if text.endswith(ARCHIVE_SUFFIX):
        text = text[: -len(ARCHIVE_SUFFIX)]
    return Path(text)


def archive_path_for(staging_dir: Path) -> Path:
    """Return the archive written for a staging directory: `<staging_dir>.zip`."""
    return staging_dir.with_name(staging_dir.name + ARCHIVE_SUFFIX)


def build_layout(output_root: str | Path, gav: GAV) -> RepositoryLayout:
    """Compute the metadata and version directories for a coordinate.

    The group id is split on `.` into nested directories. Identifiers are used
    as given; nothing is sanitised.

    Args:
        output_root: Repository root directory.
        gav: Coordinates of the artifact.

    Returns:
        A `RepositoryLayout`. No directories are created.
    """
    root = Path(output_root)
    metadata_dir = root.joinpath(*gav.group_path_segments(), gav.artifact_id)
    return RepositoryLayout(
        root=root,
        metadata_dir=metadata_dir,
        version_dir=metadata_dir / gav.version,
    )
