"""
Tree builder: flat path mappings to nested, content-addressed trees and back.
"""
import logging
from typing import Dict, List, Mapping
from ..exceptions import NotFound, ObjectError
from .objects import Blob, Tree, load_tree
from .store import ObjectStore

logger = logging.getLogger(__name__)

class TreeBuilder:
    """Builds and expands directory snapshots on top of an object store."""

    def __init__(self, store: ObjectStore):
        self.store = store

    def build(self, files: Mapping[str, bytes]) -> str:
        """Store every file's content and return the root tree id."""
        blob_ids = {}
        for path, content in files.items():
            blob_ids[path] = Blob(content).store(self.store)
        return self.build_from_ids(blob_ids)

    def build_from_ids(self, blob_ids: Mapping[str, str]) -> str:
        """Write the tree levels for an already stored ``path -> blob id`` map."""
        root: Dict[str, object] = {}
        for path, blob_id in blob_ids.items():
            parts = [p for p in path.split("/") if p]
            if not parts or any(p in (".", "..") for p in parts):
                raise ObjectError(f"Invalid path for tree: {path!r}")
            node = root
            for part in parts[:-1]:
                child = node.setdefault(part, {})
                if not isinstance(child, dict):
                    raise ObjectError(f"Path {path!r} collides with file {part!r}")
                node = child
            if isinstance(node.get(parts[-1]), dict):
                raise ObjectError(f"Path {path!r} collides with a directory")
            node[parts[-1]] = blob_id
        tree_id = self._write_level(root)
        logger.debug("Built tree %s from %d files", tree_id[:8], len(blob_ids))
        return tree_id

    def _write_level(self, node: Dict[str, object]) -> str:
        entries = {}
        for name, child in node.items():
            if isinstance(child, dict):
                entries[name] = ("tree", self._write_level(child))
            else:
                entries[name] = ("blob", child)
        return Tree(entries).store(self.store)

    def expand(self, tree_id: str) -> Dict[str, str]:
        """Flatten a tree into ``relative path -> blob id``.

        Raises NotFound if any referenced object is missing.
        """
        files = {}
        pending = [("", tree_id)]
        while pending:
            prefix, current = pending.pop()
            tree = load_tree(self.store, current)
            for name, (kind, obj_id) in tree.entries.items():
                path = f"{prefix}{name}"
                if kind == "tree":
                    pending.append((path + "/", obj_id))
                else:
                    if not self.store.contains(obj_id):
                        raise NotFound(f"Blob {obj_id} for {path} not found")
                    files[path] = obj_id
        return files

class TreeDiff:
    """Whole-file differences between two ``path -> blob id`` mappings."""

    def __init__(self, added: List[str], removed: List[str], modified: List[str]):
        self.added = added
        self.removed = removed
        self.modified = modified

    def __bool__(self) -> bool:
        return bool(self.added or self.removed or self.modified)

    def __repr__(self):
        return f"TreeDiff(added={self.added}, removed={self.removed}, modified={self.modified})"

def diff_files(old: Mapping[str, str], new: Mapping[str, str]) -> TreeDiff:
    added = sorted(new.keys() - old.keys())
    removed = sorted(old.keys() - new.keys())
    modified = sorted(p for p in old.keys() & new.keys() if old[p] != new[p])
    return TreeDiff(added, removed, modified)
