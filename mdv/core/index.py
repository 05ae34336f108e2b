"""
Index (staging area) management.
"""
import json
import logging
from pathlib import Path
from typing import Iterable, List
from ..exceptions import NotTracked, StorageFailure
from .fs import atomic_write

logger = logging.getLogger(__name__)

class Index:
    """Ordered, de-duplicated set of paths staged for the next commit.

    Stored as a JSON list. Callers ``load()`` at the start of a command and
    ``save()`` at the end; concurrent writers are not coordinated.
    """

    def __init__(self, mdv_dir: Path):
        self.index_file = Path(mdv_dir) / "index"
        self.entries: List[str] = []

    def load(self) -> List[str]:
        """Load index from JSON file."""
        if not self.index_file.exists():
            self.entries = []
            return []

        try:
            with open(self.index_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (IOError, OSError) as e:
            raise StorageFailure(f"Failed to read index: {e}") from e
        except json.JSONDecodeError as e:
            raise StorageFailure(f"Index file is corrupt: {e}") from e

        self.entries = list(dict.fromkeys(data))
        return list(self.entries)

    def save(self):
        """Save index to JSON file."""
        atomic_write(self.index_file, json.dumps(self.entries, indent=2).encode())

    def add(self, path: str) -> bool:
        """Stage ``path``. Returns False when it was already staged."""
        if path in self.entries:
            return False
        self.entries.append(path)
        logger.debug("Staged %s", path)
        return True

    def remove(self, path: str):
        if path not in self.entries:
            raise NotTracked(path)
        self.entries.remove(path)
        logger.debug("Unstaged %s", path)

    def discard(self, paths: Iterable[str]):
        drop = set(paths)
        self.entries = [p for p in self.entries if p not in drop]

    def list(self) -> List[str]:
        return list(self.entries)

    def clear(self):
        self.entries = []

    def __contains__(self, path: str) -> bool:
        return path in self.entries

    def __len__(self) -> int:
        return len(self.entries)
