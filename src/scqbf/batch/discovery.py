"""Locate instance files from a directory or a manifest file."""

from __future__ import annotations

from pathlib import Path


def discover_instances(path: str | Path) -> list[Path]:
    """List instance files, sorted by file name.

    If ``path`` is a directory, every regular file directly inside it
    is an instance. Otherwise ``path`` is read as a manifest with one
    instance path per line; blank lines and lines starting with ``#``
    are skipped, and relative entries are resolved against the
    manifest's directory.

    Args:
        path: Directory or manifest file.

    Returns:
        Instance paths sorted by file name.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"No such instance directory or manifest: {p}")

    instances: list[Path] = []
    if p.is_dir():
        instances = [f for f in p.iterdir() if f.is_file()]
    else:
        for line in p.read_text(encoding="utf-8").splitlines():
            entry = line.strip()
            if not entry or entry.startswith("#"):
                continue
            f = Path(entry)
            instances.append(f if f.is_absolute() else p.parent / f)

    instances.sort(key=lambda f: f.name)
    return instances
