"""Typer CLI entry point for the AAR/JAR repackager."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from aar_repackager.config import RepackagerSettings
from aar_repackager.exceptions import RepackagerError
from aar_repackager.models import ArtifactSpec
from aar_repackager.pipeline import repackage
from aar_repackager.visualize import build_layout_tree

BANNER = "AAR/JAR Repackager v1.0"

app = typer.Typer(add_completion=False)
console = Console()


@app.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    help=f"{BANNER}\n\nCopy an AAR or JAR into a Maven repository layout with POM, metadata and checksums, then zip it.",
)
def run(
    input_file: Annotated[Path, typer.Option("--input", "-i", help="AAR/JAR input file.")],
    output: Annotated[Path, typer.Option("--output", "-o", help="ZIP output file.")],
    group: Annotated[str, typer.Option("--group", "-g", help="Group name.")],
    artifact: Annotated[str, typer.Option("--artifact", "-a", help="Artifact name.")],
    version: Annotated[str, typer.Option("--version", "-v", help="Artifact version.")],
    sources: Annotated[
        Optional[Path],
        typer.Option("--sources", "-s", help="Sources JAR file (optional)."),
    ] = None,
    show_tree: Annotated[
        bool,
        typer.Option("--show-tree/--no-show-tree", help="Print the repository layout that was packed."),
    ] = False,
) -> None:
    try:
        settings = RepackagerSettings.from_env()
        settings.validate()

        spec = ArtifactSpec.from_options(
            input_path=input_file,
            sources_path=sources,
            output_path=output,
            group_id=group,
            artifact_id=artifact,
            version=version,
        )
        result = repackage(spec, templates=settings.template_provider(), clock=settings.clock())
    except (RepackagerError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from None

    if show_tree:
        console.print(build_layout_tree(result))
    console.print(f"[green]Wrote[/green] {result.archive_path}")


def main() -> None:
    """Console-script entry point."""
    app()
