"""Rich rendering of the repository tree packed into the archive."""

from __future__ import annotations

from rich.tree import Tree

from aar_repackager.models import RepackageResult


SHA1_PREVIEW = 12


def build_layout_tree(result: RepackageResult) -> Tree:
    """Build a Rich Tree of the files that went into the archive.

    Directories become nested branches; each published file is a leaf labelled
    with a shortened SHA-1.

    Args:
        result: Outcome of a repackaging run.

    Returns:
        A Rich Tree object for rendering.
    """
    root = Tree(f"[bold]{result.archive_path.name}[/bold] [dim]({result.gav.compact()}, {result.packaging})[/dim]")
    branches: dict[tuple[str, ...], Tree] = {(): root}

    for published in sorted(result.files, key=lambda f: f.path.parts):
        parts = published.path.parts
        for depth in range(1, len(parts)):
            key = parts[:depth]
            if key not in branches:
                branches[key] = branches[key[:-1]].add(f"{parts[depth - 1]}/")
        branches[parts[:-1]].add(f"{parts[-1]} [dim]sha1:{published.sha1[:SHA1_PREVIEW]}[/dim]")
    return root
