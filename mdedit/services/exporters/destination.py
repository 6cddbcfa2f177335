from __future__ import annotations

from pathlib import Path

from platformdirs import user_downloads_dir


def default_download_dir() -> Path:
    return Path(user_downloads_dir())


def resolve_destination(directory: Path, filename: str) -> Path:
    """
    Path for a new download in `directory`, never overwriting an existing file:
    document.md, document (1).md, document (2).md, ...
    """
    directory.mkdir(parents=True, exist_ok=True)
    candidate = directory / filename
    stem, suffix = candidate.stem, candidate.suffix
    n = 1
    while candidate.exists():
        candidate = directory / f"{stem} ({n}){suffix}"
        n += 1
    return candidate
