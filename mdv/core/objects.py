"""
MDV object implementations (blob, tree, revision).
"""
import json
import time
from datetime import datetime
from typing import Dict, Optional, Tuple, Any
from ..exceptions import NotFound, ObjectError
from .store import ObjectStore

class MDVObject:
    """Base class for all stored objects."""

    def __init__(self, content: bytes, obj_type: str):
        self.content = content
        self.obj_type = obj_type
        self._id = None

    @property
    def id(self) -> str:
        """Get the SHA-256 id of this object."""
        if self._id is None:
            self._id = ObjectStore.hash(self.serialize())
        return self._id

    def serialize(self) -> bytes:
        """Serialize object for storage."""
        header = f"{self.obj_type} {len(self.content)}\0".encode()
        return header + self.content

    def store(self, store: ObjectStore) -> str:
        self._id = store.put(self.serialize())
        return self._id

    @classmethod
    def deserialize(cls, data: bytes) -> Tuple[str, bytes]:
        """Deserialize object from storage."""
        null_pos = data.find(b'\0')
        if null_pos == -1:
            raise ObjectError("Invalid object format: no null separator found")

        header = data[:null_pos].decode()
        try:
            obj_type, size = header.split(' ')
            expected_size = int(size)
        except ValueError:
            raise ObjectError(f"Invalid object header: {header}")

        content = data[null_pos + 1:]
        if len(content) != expected_size:
            raise ObjectError(f"Object size mismatch: expected {expected_size}, got {len(content)}")

        return obj_type, content

class Blob(MDVObject):
    """Represents a file blob object."""

    def __init__(self, content: bytes):
        super().__init__(content, "blob")

class Tree(MDVObject):
    """One directory level: name -> (kind, id), kind being blob or tree."""

    def __init__(self, entries: Dict[str, Tuple[str, str]]):
        self.entries = entries
        content = self._serialize_entries()
        super().__init__(content, "tree")

    def _serialize_entries(self) -> bytes:
        """Serialize tree entries, sorted by name."""
        tree_entries = []
        for name, (kind, obj_id) in sorted(self.entries.items()):
            if "/" in name or "\n" in name:
                raise ObjectError(f"Invalid tree entry name: {name!r}")
            tree_entries.append(f"{kind} {obj_id} {name}")
        return "\n".join(tree_entries).encode()

    @classmethod
    def from_content(cls, content: bytes) -> 'Tree':
        """Create a tree from serialized content."""
        entries = {}
        if content:
            for line in content.decode().split('\n'):
                if not line:
                    continue
                parts = line.split(' ', 2)
                if len(parts) != 3 or parts[0] not in ("blob", "tree"):
                    raise ObjectError(f"Invalid tree entry: {line}")
                kind, obj_id, name = parts
                entries[name] = (kind, obj_id)

        tree = cls.__new__(cls)
        tree.entries = entries
        tree.content = content
        tree.obj_type = "tree"
        tree._id = None
        return tree

class Revision(MDVObject):
    """Represents a commit node in the revision graph."""

    def __init__(self, tree_id: str, message: str, author: str,
                 main_parent: Optional[str] = None, merge_parent: Optional[str] = None,
                 timestamp: Optional[float] = None):
        if merge_parent is not None and main_parent is None:
            raise ObjectError("A merge revision needs a main parent")
        self.tree_id = tree_id
        self.message = message
        self.author = author
        self.main_parent = main_parent
        self.merge_parent = merge_parent
        self.timestamp = time.time() if timestamp is None else timestamp
        self.date = datetime.fromtimestamp(self.timestamp).strftime("%Y-%m-%d %H:%M:%S")

        content = json.dumps(self.to_dict(), indent=2, sort_keys=True).encode()
        super().__init__(content, "revision")

    @property
    def parents(self) -> Tuple[str, ...]:
        return tuple(p for p in (self.main_parent, self.merge_parent) if p)

    @property
    def is_root(self) -> bool:
        return self.main_parent is None

    @classmethod
    def from_content(cls, content: bytes) -> 'Revision':
        """Create a revision from serialized content."""
        try:
            data = json.loads(content.decode())
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ObjectError(f"Invalid revision format: {e}")
        if not isinstance(data, dict) or "tree" not in data:
            raise ObjectError("Invalid revision format: missing tree")

        revision = cls.__new__(cls)
        revision.tree_id = data["tree"]
        revision.message = data.get("message", "")
        revision.author = data.get("author", "")
        revision.main_parent = data.get("main_parent")
        revision.merge_parent = data.get("merge_parent")
        revision.timestamp = data.get("timestamp", 0)
        revision.date = data.get("date", "")
        revision.content = content
        revision.obj_type = "revision"
        revision._id = None
        return revision

    def to_dict(self) -> Dict[str, Any]:
        """Convert revision to dictionary."""
        return {
            "tree": self.tree_id,
            "main_parent": self.main_parent,
            "merge_parent": self.merge_parent,
            "message": self.message,
            "timestamp": self.timestamp,
            "date": self.date,
            "author": self.author
        }

def read_object(store: ObjectStore, obj_id: str) -> Tuple[str, bytes]:
    """Read an object, returning its type and content."""
    data = store.get(obj_id)
    try:
        return MDVObject.deserialize(data)
    except (ObjectError, UnicodeDecodeError) as e:
        raise NotFound(f"Object {obj_id} is corrupt: {e}") from e

def _load(store: ObjectStore, obj_id: str, expected: str) -> bytes:
    obj_type, content = read_object(store, obj_id)
    if obj_type != expected:
        raise NotFound(f"Expected {expected} object at {obj_id}, got {obj_type}")
    return content

def load_blob(store: ObjectStore, obj_id: str) -> bytes:
    return _load(store, obj_id, "blob")

def load_tree(store: ObjectStore, obj_id: str) -> Tree:
    tree = Tree.from_content(_load(store, obj_id, "tree"))
    tree._id = obj_id
    return tree

def load_revision(store: ObjectStore, obj_id: str) -> Revision:
    revision = Revision.from_content(_load(store, obj_id, "revision"))
    revision._id = obj_id
    return revision
