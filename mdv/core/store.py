"""
Content-addressed object store.

Objects live under ``objects/<id[:2]>/<id[2:]>`` where ``id`` is the SHA-256
hex digest of the stored bytes. The on-disk payload is zlib-compressed.
Stored objects are never rewritten or deleted.
"""
import hashlib
import logging
import zlib
from pathlib import Path
from typing import List
from ..exceptions import NotFound, StorageFailure
from .fs import atomic_write, read_bytes

logger = logging.getLogger(__name__)

ID_LENGTH = 64

class ObjectStore:
    """Immutable blob storage keyed by content digest."""

    def __init__(self, objects_dir: Path):
        self.objects_dir = Path(objects_dir)

    @staticmethod
    def hash(data: bytes) -> str:
        """Return the id ``data`` would be stored under, without storing it."""
        return hashlib.sha256(data).hexdigest()

    def _path(self, obj_id: str) -> Path:
        return self.objects_dir / obj_id[:2] / obj_id[2:]

    def contains(self, obj_id: str) -> bool:
        if len(obj_id) != ID_LENGTH:
            return False
        return self._path(obj_id).is_file()

    def put(self, data: bytes) -> str:
        """Store ``data`` if absent and return its id.

        The object is on disk and fsynced before this returns.
        """
        obj_id = self.hash(data)
        obj_file = self._path(obj_id)
        if obj_file.exists():
            logger.debug("Object %s already stored", obj_id[:8])
            return obj_id
        atomic_write(obj_file, zlib.compress(data))
        logger.debug("Stored object %s (%d bytes)", obj_id[:8], len(data))
        return obj_id

    def get(self, obj_id: str) -> bytes:
        """Return the bytes stored under ``obj_id``."""
        obj_file = self._path(obj_id)
        if len(obj_id) != ID_LENGTH or not obj_file.is_file():
            raise NotFound(f"Object {obj_id} not found")
        compressed = read_bytes(obj_file)
        try:
            return zlib.decompress(compressed)
        except zlib.error as e:
            raise NotFound(f"Object {obj_id} is corrupt: {e}") from e

    def find(self, prefix: str) -> List[str]:
        """List the stored ids starting with ``prefix``."""
        prefix = prefix.lower()
        if len(prefix) < 2 or any(c not in "0123456789abcdef" for c in prefix):
            return []
        shard = self.objects_dir / prefix[:2]
        if not shard.is_dir():
            return []
        try:
            return sorted(
                shard.name + entry.name
                for entry in shard.iterdir()
                if entry.is_file() and (shard.name + entry.name).startswith(prefix)
            )
        except OSError as e:
            raise StorageFailure(f"Failed to list objects: {e}") from e
