"""Build the Maven repository tree for one artifact and zip it."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from aar_repackager.checksum import write_checksum_sidecars
from aar_repackager.exceptions import InvalidArgumentsError, RepackageIOError
from aar_repackager.kinds import PackageKind
from aar_repackager.layout import RepositoryLayout, build_layout
from aar_repackager.models import ArtifactSpec, PublishedFile, RepackageResult
from aar_repackager.packer import pack_and_clean
from aar_repackager.templates import (
    METADATA_TEMPLATE,
    POM_TEMPLATE,
    BundledTemplateProvider,
    TemplateProvider,
    format_timestamp,
    metadata_substitutions,
    pom_substitutions,
    render_template,
    write_rendered,
)


SOURCES_CLASSIFIER = "sources"
SOURCES_EXTENSION = ".jar"


def _copy(src: Path, dest: Path) -> None:
    try:
        shutil.copyfile(src, dest)
    except OSError as exc:
        raise RepackageIOError(f"Failed to copy {src} to {dest}") from exc


def _publish(layout: RepositoryLayout, path: Path) -> PublishedFile:
    checksums = write_checksum_sidecars(path)
    return PublishedFile(path=layout.relative(path), md5=checksums.md5, sha1=checksums.sha1)


def ensure_fresh_staging_dir(staging_dir: Path) -> None:
    """Refuse to build into a staging directory that already has content.

    A failed run leaves its staging tree behind; packing on top of it would
    ship stale files in the next archive.

    Raises:
        InvalidArgumentsError: If `staging_dir` exists and is not an empty directory.
    """
    if not staging_dir.exists():
        return
    if not staging_dir.is_dir() or any(staging_dir.iterdir()):
        raise InvalidArgumentsError(
            f"Staging directory {staging_dir} already exists and is not empty; remove it and retry"
        )


def stage_repository(
    spec: ArtifactSpec,
    kind: PackageKind,
    templates: TemplateProvider,
    clock: Callable[[], datetime],
) -> tuple[RepositoryLayout, list[PublishedFile]]:
    """Write the artifact, POM, metadata and optional sources into the staging tree.

    Every file gets `.md5` and `.sha1` sidecars. Nothing is zipped here.

    Returns:
        The layout used and the published files in the order they were written.
    """
    gav = spec.gav
    layout = build_layout(spec.staging_dir, gav)

    try:
        layout.version_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise RepackageIOError(f"Failed to create {layout.version_dir}") from exc

    files: list[PublishedFile] = []

    artifact = layout.version_dir / f"{gav.file_stem()}{kind.extension}"
    _copy(spec.input_path, artifact)
    files.append(_publish(layout, artifact))

    pom = layout.version_dir / f"{gav.file_stem()}.pom"
    pom_text = render_template(
        templates.load(POM_TEMPLATE),
        pom_substitutions(gav.group_id, gav.artifact_id, gav.version, kind.packaging),
    )
    write_rendered(pom, pom_text)
    files.append(_publish(layout, pom))

    metadata_text = render_template(
        templates.load(METADATA_TEMPLATE),
        metadata_substitutions(gav.group_id, gav.artifact_id, gav.version, format_timestamp(clock())),
    )
    write_rendered(layout.metadata_file, metadata_text)
    files.append(_publish(layout, layout.metadata_file))

    if spec.sources_path is not None:
        sources = layout.version_dir / f"{gav.file_stem()}-{SOURCES_CLASSIFIER}{SOURCES_EXTENSION}"
        _copy(spec.sources_path, sources)
        files.append(_publish(layout, sources))

    return layout, files


def repackage(
    spec: ArtifactSpec,
    templates: TemplateProvider | None = None,
    clock: Callable[[], datetime] | None = None,
) -> RepackageResult:
    """Run the whole repackaging pipeline.

    The input kind and the staging directory are checked before anything
    touches the disk. After that each step either completes or raises; a failed
    run leaves whatever it already wrote in the staging directory.

    Args:
        spec: Input/output paths and coordinates.
        templates: Source of the POM and metadata templates (bundled by default).
        clock: Returns the moment stamped into maven-metadata.xml (local time by default).

    Raises:
        UnsupportedInputKindError: If the input is neither an AAR nor a JAR.
        InvalidArgumentsError: If the staging directory already holds files.
        ResourceMissingError: If a template cannot be loaded.
        RepackageIOError: On any filesystem failure.

    Returns:
        A `RepackageResult` describing the archive and its contents.
    """
    kind = spec.kind
    ensure_fresh_staging_dir(spec.staging_dir)
    layout, files = stage_repository(
        spec,
        kind,
        templates or BundledTemplateProvider(),
        clock or datetime.now,
    )
    archive = pack_and_clean(layout.root)
    return RepackageResult(
        archive_path=archive,
        gav=spec.gav,
        packaging=kind.packaging,
        layout=layout,
        files=files,
    )
