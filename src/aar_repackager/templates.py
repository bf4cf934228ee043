"""Bundled POM/metadata templates and literal placeholder rendering."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from importlib import resources
from pathlib import Path
from typing import Protocol

from aar_repackager.exceptions import RepackageIOError, ResourceMissingError


POM_TEMPLATE = "artifact-pom.pom"
METADATA_TEMPLATE = "maven-metadata.xml"

GROUP_ID_TOKEN = "GROUP_ID_HERE"
ARTIFACT_ID_TOKEN = "ARTIFACT_ID_HERE"
VERSION_TOKEN = "ARTIFACT_VERSION_HERE"
PACKAGING_TOKEN = "ARTIFACT_EXTENSION_HERE"
TIMESTAMP_TOKEN = "ARTIFACT_DATE_HERE"

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


class TemplateProvider(Protocol):
    """Read-only source of named template texts."""

    def load(self, name: str) -> str: ...


class BundledTemplateProvider:
    """Templates shipped inside the `aar_repackager.resources` package."""

    package = "aar_repackager.resources"

    def load(self, name: str) -> str:
        resource = resources.files(self.package).joinpath(name)
        if not resource.is_file():
            raise ResourceMissingError(f"Bundled template not found: {name}")
        return resource.read_text(encoding="utf-8")


class DirectoryTemplateProvider:
    """Templates read from a directory on disk."""

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory)

    def load(self, name: str) -> str:
        path = self.directory / name
        if not path.is_file():
            raise ResourceMissingError(f"Template not found: {path}")
        return path.read_text(encoding="utf-8")


def render_template(template: str, substitutions: Mapping[str, str]) -> str:
    """Replace every occurrence of each placeholder token.

    Replacement is a plain substring substitution, so values containing regex
    or format characters are written verbatim.

    Args:
        template: Template text.
        substitutions: Mapping of placeholder token to replacement value.

    Returns:
        The rendered text.
    """
    rendered = template
    for token, value in substitutions.items():
        rendered = rendered.replace(token, value)
    return rendered


def format_timestamp(moment: datetime) -> str:
    """Format a moment as the 14-digit Maven `lastUpdated` stamp."""
    return moment.strftime(TIMESTAMP_FORMAT)


def pom_substitutions(group_id: str, artifact_id: str, version: str, packaging: str) -> dict[str, str]:
    return {
        GROUP_ID_TOKEN: group_id,
        ARTIFACT_ID_TOKEN: artifact_id,
        VERSION_TOKEN: version,
        PACKAGING_TOKEN: packaging,
    }


def metadata_substitutions(group_id: str, artifact_id: str, version: str, timestamp: str) -> dict[str, str]:
    return {
        GROUP_ID_TOKEN: group_id,
        ARTIFACT_ID_TOKEN: artifact_id,
        VERSION_TOKEN: version,
        TIMESTAMP_TOKEN: timestamp,
    }


def write_rendered(path: Path, text: str) -> None:
    """Write rendered text as UTF-8, replacing any existing file."""
    try:
        path.write_bytes(text.encode("utf-8"))
    except OSError as exc:
        raise RepackageIOError(f"Failed to write {path}") from exc
