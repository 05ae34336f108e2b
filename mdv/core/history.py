"""
Revision graph: creating revisions and walking their parent edges.
"""
import logging
from collections import deque
from typing import Dict, List, Optional
from ..exceptions import NotFound, Unrelated
from .objects import Revision, load_revision
from .store import ObjectStore

logger = logging.getLogger(__name__)

class RevisionGraph:
    """Immutable revisions, stored in the object store and keyed by id."""

    def __init__(self, store: ObjectStore):
        self.store = store
        self._cache: Dict[str, Revision] = {}

    def create(self, tree_id: str, message: str, author: str,
               main_parent: Optional[str] = None, merge_parent: Optional[str] = None) -> str:
        """Store a new revision and return its id."""
        for parent in (main_parent, merge_parent):
            if parent is not None:
                self.get(parent)
        revision = Revision(tree_id, message, author, main_parent, merge_parent)
        revision_id = revision.store(self.store)
        self._cache[revision_id] = revision
        logger.debug("Created revision %s (tree %s)", revision_id[:8], tree_id[:8])
        return revision_id

    def get(self, revision_id: str) -> Revision:
        revision = self._cache.get(revision_id)
        if revision is None:
            revision = load_revision(self.store, revision_id)
            self._cache[revision_id] = revision
        return revision

    def log(self, start: Optional[str], limit: Optional[int] = None) -> List[Revision]:
        """Follow main parents from ``start``, newest first."""
        revisions = []
        current = start
        seen = set()
        while current and (limit is None or len(revisions) < limit):
            if current in seen:
                raise NotFound(f"Revision history loops at {current}")
            seen.add(current)
            revision = self.get(current)
            revisions.append(revision)
            current = revision.main_parent
        return revisions

    def ancestors(self, revision_id: str) -> Dict[str, int]:
        """Breadth-first distances to every ancestor, ``revision_id`` included."""
        distances = {revision_id: 0}
        frontier = deque([revision_id])
        while frontier:
            current = frontier.popleft()
            for parent in self.get(current).parents:
                if parent not in distances:
                    distances[parent] = distances[current] + 1
                    frontier.append(parent)
        return distances

    def is_ancestor(self, ancestor: str, descendant: str) -> bool:
        return ancestor in self.ancestors(descendant)

    def merge_base(self, first: str, second: str) -> str:
        """Nearest common ancestor by combined distance from both tips."""
        first_distances = self.ancestors(first)
        second_distances = self.ancestors(second)
        common = first_distances.keys() & second_distances.keys()
        if not common:
            raise Unrelated(f"Revisions {first[:8]} and {second[:8]} share no history")
        base = min(common, key=lambda r: (first_distances[r] + second_distances[r], r))
        logger.debug("Merge base of %s and %s is %s", first[:8], second[:8], base[:8])
        return base
