"""
Filesystem helpers shared by the object store, refs, index and checkout.
"""
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Union
from ..exceptions import StorageFailure

logger = logging.getLogger(__name__)

MDV_DIR = ".mdv"

def atomic_write(path: Union[str, Path], data: bytes) -> None:
    """Write ``data`` to ``path`` so readers see either the old or new file.

    The bytes go to a temporary sibling, are fsynced, then renamed over the
    destination.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as e:
        raise StorageFailure(f"Failed to write {path}: {e}") from e
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_name, path)
    except OSError as e:
        # Clean up temp file if something went wrong
        if os.path.exists(temp_name):
            os.unlink(temp_name)
        raise StorageFailure(f"Failed to write {path}: {e}") from e

def read_bytes(path: Path) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except (IOError, OSError) as e:
        raise StorageFailure(f"Failed to read file {path}: {e}") from e

def working_files(root: Path) -> Dict[str, Path]:
    """Map every file under ``root`` to its POSIX path relative to ``root``."""
    files = {}
    for file_path in root.rglob("*"):
        rel_path = file_path.relative_to(root).as_posix()
        # Skip .mdv directory and its contents
        if rel_path == MDV_DIR or rel_path.startswith(MDV_DIR + "/"):
            continue
        if file_path.is_file():
            files[rel_path] = file_path
    return files

def remove_file(root: Path, rel_path: str) -> None:
    """Delete a working file and prune directories it leaves empty."""
    full_path = root / rel_path
    try:
        if full_path.exists():
            full_path.unlink()
        parent = full_path.parent
        while parent != root and parent.exists() and not any(parent.iterdir()):
            parent.rmdir()
            parent = parent.parent
    except OSError as e:
        raise StorageFailure(f"Failed to remove {rel_path}: {e}") from e

def copy_repository(source: Path, destination: Path) -> None:
    """Recursively copy a whole repository root, marker directory included."""
    logger.debug("Copying repository %s -> %s", source, destination)
    try:
        shutil.copytree(source, destination, dirs_exist_ok=True)
    except (shutil.Error, OSError) as e:
        raise StorageFailure(f"Failed to copy {source} to {destination}: {e}") from e
