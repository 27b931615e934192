"""
Filesystem helpers for the build stages

Directory checks, resource catalogs, atomic text writes, scratch directory
removal and the asset mirror used for static asset folders. Every OSError is
re-raised as IOFailure naming the offending path.
"""

import os
import shutil
import stat
import tempfile
from pathlib import Path
from typing import List

from ..models.resources import ResourceCatalog
from .errors import IOFailure
from .log import LOG


def directory_open(path: Path, purpose: str) -> Path:
    """Return path if it is an existing directory, raise IOFailure otherwise"""
    if not path.is_dir():
        raise IOFailure(f"{purpose} directory '{path}' expected but not found")
    return path


def directory_make(path: Path) -> Path:
    """Create a directory (and its parents) if it does not yet exist"""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IOFailure(f"Could not create directory '{path}': {e}") from e
    return path


def files_list(directory: Path) -> List[Path]:
    """List the regular files of a flat directory, sorted by name"""
    try:
        return sorted((p for p in directory.iterdir() if p.is_file()), key=lambda p: p.name)
    except OSError as e:
        raise IOFailure(f"Could not list files in '{directory}': {e}") from e


def catalog_build(kind: str, directory: Path) -> ResourceCatalog:
    """
    List a resource directory into a ResourceCatalog

    Args:
        kind: Resource category for messages ("partial", "style", "script")
        directory: Flat directory to list (no recursion)

    Returns:
        Catalog mapping every file name to its path
    """
    LOG(f"Generating list of {kind}s...", level=2)
    catalog = ResourceCatalog(kind=kind, directory=directory)
    for path in files_list(directory):
        catalog.files[path.name] = path
        LOG(f"Found {kind}: {path.name}", level=3)
    LOG(f"All {kind}s listed ({len(catalog)})", level=2)
    return catalog


def text_read(path: Path) -> str:
    """Read a UTF-8 text file"""
    try:
        return path.read_text(encoding='utf-8')
    except OSError as e:
        raise IOFailure(f"Could not read file contents of '{path}': {e}") from e


def _fileMode_get(path: Path) -> int:
    """Mode for a written file: the target's current mode, else 0o666 minus the umask"""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def text_write(path: Path, content: str) -> None:
    """
    Write a UTF-8 text file atomically

    Content goes to a temporary sibling first and is moved over the target,
    so a failed write never leaves a partial file behind. The written file
    keeps the target's permissions, or follows the umask for a new file.
    """
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    except OSError as e:
        raise IOFailure(f"Could not write '{path}': {e}") from e
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(content)
        os.chmod(tmp_name, _fileMode_get(path))
        os.replace(tmp_name, path)
    except OSError as e:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise IOFailure(f"Could not write '{path}': {e}") from e


def directory_remove(path: Path) -> None:
    """Delete a directory and its contents"""
    try:
        shutil.rmtree(path)
    except OSError as e:
        raise IOFailure(f"Could not delete directory '{path}': {e}") from e


def assets_mirror(source: Path, target: Path) -> int:
    """
    Recursively mirror a directory tree, skipping files present at the target

    Args:
        source: Existing directory to copy from
        target: Destination root (created if missing)

    Returns:
        Number of files copied
    """
    copied = 0
    try:
        target.mkdir(parents=True, exist_ok=True)
        for root, dirs, files in os.walk(source):
            relative = Path(root).relative_to(source)
            for name in dirs:
                (target / relative / name).mkdir(exist_ok=True)
            for name in files:
                destination = target / relative / name
                if destination.exists():
                    continue
                shutil.copy2(Path(root) / name, destination)
                copied += 1
    except OSError as e:
        raise IOFailure(f"Could not copy '{source}' to '{target}': {e}") from e
    return copied
