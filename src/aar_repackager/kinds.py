"""Classify input packages by file extension."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from aar_repackager.exceptions import UnsupportedInputKindError


class PackageKind(str, Enum):
    """Supported library package kinds.

    The value is the packaging label written into the POM.
    """

    AAR = "aar"
    JAR = "jar"

    @property
    def extension(self) -> str:
        return f".{self.value}"

    @property
    def packaging(self) -> str:
        return self.value


def classify_input(path: str | Path) -> PackageKind:
    """Return the package kind for an input file.

    Matching is a case-sensitive suffix check on the path string, so
    `lib.AAR` is rejected just like `lib.zip`.

    Args:
        path: Path to the compiled library file.

    Raises:
        UnsupportedInputKindError: If the path ends in neither `.aar` nor `.jar`.

    Returns:
        The matching `PackageKind`.
    """
    name = str(path)
    for kind in PackageKind:
        if name.endswith(kind.extension):
            return kind
    raise UnsupportedInputKindError(f"Was not given JAR or AAR as input: {name}")
