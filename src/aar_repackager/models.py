"""Pydantic models for the artifact being repackaged and the files produced."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from aar_repackager.exceptions import InvalidArgumentsError
from aar_repackager.kinds import PackageKind, classify_input
from aar_repackager.layout import RepositoryLayout, strip_zip_suffix


class GAV(BaseModel):
    """Maven coordinates (GroupId, ArtifactId, Version)."""

    model_config = ConfigDict(frozen=True)

    group_id: str = Field(..., min_length=1)
    artifact_id: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)

    def compact(self) -> str:
        """Return a compact string representation.

        Returns:
            A string like `groupId:artifactId:version`.
        """
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    def group_path_segments(self) -> list[str]:
        """Split the dot-delimited group id into directory names."""
        return self.group_id.split(".")

    def file_stem(self) -> str:
        """Return `artifactId-version`, the prefix of every versioned file."""
        return f"{self.artifact_id}-{self.version}"


class ArtifactSpec(BaseModel):
    """Everything one repackaging run needs, built once from the CLI options."""

    model_config = ConfigDict(frozen=True)

    input_path: Path
    sources_path: Path | None = None
    output_path: Path
    gav: GAV

    @model_validator(mode="after")
    def _check_staging_dir(self) -> "ArtifactSpec":
        # The staging directory is deleted after packing, so it must name a real child directory.
        if self.staging_dir.name in ("", ".", ".."):
            raise ValueError(f"Output path does not name a directory to stage into: {self.output_path}")
        return self

    @classmethod
    def from_options(
        cls,
        *,
        input_path: str | Path,
        output_path: str | Path,
        group_id: str,
        artifact_id: str,
        version: str,
        sources_path: str | Path | None = None,
    ) -> "ArtifactSpec":
        """Build a spec from raw option values.

        Raises:
            InvalidArgumentsError: If a value is missing or empty.
        """
        try:
            return cls(
                input_path=input_path,
                sources_path=sources_path,
                output_path=output_path,
                gav=GAV(group_id=group_id, artifact_id=artifact_id, version=version),
            )
        except ValidationError as exc:
            raise InvalidArgumentsError(f"Invalid artifact options: {exc}") from exc

    @property
    def kind(self) -> PackageKind:
        return classify_input(self.input_path)

    @property
    def staging_dir(self) -> Path:
        """Directory the repository tree is built in before zipping."""
        return strip_zip_suffix(self.output_path)


class PublishedFile(BaseModel):
    """A file written into the repository, with its checksums."""

    path: Path
    md5: str
    sha1: str


class RepackageResult(BaseModel):
    """Outcome of a successful run."""

    archive_path: Path
    gav: GAV
    packaging: str
    layout: RepositoryLayout
    files: list[PublishedFile] = Field(default_factory=list)
