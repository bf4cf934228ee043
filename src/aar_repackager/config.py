"""Runtime settings module.

Configuration is read from environment variables. Nothing here is required:
with no variables set the repackager uses local time and the bundled templates.
"""
from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from aar_repackager.templates import (
    BundledTemplateProvider,
    DirectoryTemplateProvider,
    TemplateProvider,
)


TIMEZONE_LOCAL = "local"
TIMEZONE_UTC = "utc"


@dataclass(frozen=True)
class RepackagerSettings:
    """Runtime settings container.

    Attributes:
        timezone_mode: "local" or "utc"; clock used for the metadata lastUpdated stamp
        templates_dir: Directory overriding the bundled POM/metadata templates
    """

    timezone_mode: str = TIMEZONE_LOCAL
    templates_dir: Path | None = None

    @classmethod
    def from_env(cls) -> "RepackagerSettings":
        """Create settings from environment variables.

        Environment variables:
            AAR_REPACKAGER_TIMEZONE: "local" or "utc" (default: "local")
            AAR_REPACKAGER_TEMPLATES_DIR: Directory containing artifact-pom.pom
                and maven-metadata.xml
        """
        templates_dir = os.getenv("AAR_REPACKAGER_TEMPLATES_DIR")
        return cls(
            timezone_mode=os.getenv("AAR_REPACKAGER_TIMEZONE", TIMEZONE_LOCAL).strip().lower(),
            templates_dir=Path(templates_dir) if templates_dir else None,
        )

    def validate(self) -> None:
        """Validate the settings.

        Raises:
            ValueError: If the timezone mode is unknown or the templates directory is missing.
        """
        if self.timezone_mode not in (TIMEZONE_LOCAL, TIMEZONE_UTC):
            raise ValueError(f"Unsupported timezone mode: {self.timezone_mode}")
        if self.templates_dir is not None and not self.templates_dir.is_dir():
            raise ValueError(f"AAR_REPACKAGER_TEMPLATES_DIR is not a directory: {self.templates_dir}")

    def template_provider(self) -> TemplateProvider:
        if self.templates_dir is not None:
            return DirectoryTemplateProvider(self.templates_dir)
        return BundledTemplateProvider()

    def clock(self) -> Callable[[], datetime]:
        if self.timezone_mode == TIMEZONE_UTC:
            return lambda: datetime.now(timezone.utc)
        return datetime.now
