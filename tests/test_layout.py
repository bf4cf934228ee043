from __future__ import annotations

from pathlib import Path

import pytest

from aar_repackager.exceptions import InvalidArgumentsError, UnsupportedInputKindError
from aar_repackager.kinds import PackageKind, classify_input
from aar_repackager.layout import archive_path_for, build_layout, strip_zip_suffix
from aar_repackager.models import GAV, ArtifactSpec


def test_build_layout_splits_group_into_directories(tmp_path: Path) -> None:
    gav = GAV(group_id="com.example.lib", artifact_id="foo", version="1.2.3")
    layout = build_layout(tmp_path / "out", gav)

    assert layout.metadata_dir == tmp_path / "out" / "com" / "example" / "lib" / "foo"
    assert layout.version_dir == tmp_path / "out" / "com" / "example" / "lib" / "foo" / "1.2.3"
    assert layout.metadata_file.name == "maven-metadata.xml"


def test_build_layout_does_not_touch_disk(tmp_path: Path) -> None:
    gav = GAV(group_id="org.acme", artifact_id="bar", version="2.0")
    build_layout(tmp_path / "out", gav)
    assert not (tmp_path / "out").exists()


def test_build_layout_keeps_identifiers_unmodified(tmp_path: Path) -> None:
    gav = GAV(group_id="org.acme", artifact_id="bar baz", version="1.0-SNAPSHOT")
    layout = build_layout(tmp_path, gav)
    assert layout.version_dir == tmp_path / "org" / "acme" / "bar baz" / "1.0-SNAPSHOT"


@pytest.mark.parametrize(
    ("given", "expected"),
    [
        ("build/repo.zip", "build/repo"),
        ("build/repo", "build/repo"),
        ("build/repo.zip.zip", "build/repo.zip"),
        ("build/repo.tar", "build/repo.tar"),
    ],
)
def test_strip_zip_suffix(given: str, expected: str) -> None:
    assert strip_zip_suffix(given) == Path(expected)


def test_classify_input() -> None:
    assert classify_input("lib/foo.aar") is PackageKind.AAR
    assert classify_input(Path("lib/foo.jar")) is PackageKind.JAR
    assert PackageKind.AAR.packaging == "aar"
    assert PackageKind.JAR.packaging == "jar"


@pytest.mark.parametrize("name", ["foo.zip", "foo.AAR", "foo", "foo.aar.bak"])
def test_classify_rejects_other_extensions(name: str) -> None:
    with pytest.raises(UnsupportedInputKindError):
        classify_input(name)


def test_spec_paths_ignore_zip_suffix(tmp_path: Path) -> None:
    common = dict(input_path="x.aar", group_id="g", artifact_id="a", version="1")
    with_zip = ArtifactSpec.from_options(output_path=tmp_path / "repo.zip", **common)
    without_zip = ArtifactSpec.from_options(output_path=tmp_path / "repo", **common)

    assert with_zip.staging_dir == without_zip.staging_dir == tmp_path / "repo"
    assert archive_path_for(with_zip.staging_dir) == tmp_path / "repo.zip"


def test_spec_rejects_empty_coordinates(tmp_path: Path) -> None:
    with pytest.raises(InvalidArgumentsError):
        ArtifactSpec.from_options(
            input_path="x.aar",
            output_path=tmp_path / "repo",
            group_id="",
            artifact_id="a",
            version="1",
        )


@pytest.mark.parametrize("output", [".", ".zip", "..", "build/.."])
def test_spec_rejects_output_without_directory_name(output: str) -> None:
    with pytest.raises(InvalidArgumentsError):
        ArtifactSpec.from_options(
            input_path="x.aar",
            output_path=output,
            group_id="g",
            artifact_id="a",
            version="1",
        )
