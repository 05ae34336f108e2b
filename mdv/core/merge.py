"""
Merge engine: three-way reconciliation of two branch tips at file granularity.
"""
import logging
from typing import Dict, List, Mapping, Optional, Tuple
from ..exceptions import MergeConflict, UnknownReference
from .tree import TreeDiff

logger = logging.getLogger(__name__)

Conflict = Tuple[str, Optional[str], Optional[str]]

class MergeResult:
    """Outcome of a successful merge."""

    def __init__(self, revision_id: str, tree_id: str, base_id: str,
                 up_to_date: bool = False, changes: Optional[TreeDiff] = None):
        self.revision_id = revision_id
        self.tree_id = tree_id
        self.base_id = base_id
        self.up_to_date = up_to_date
        self.changes = changes

def reconcile(base: Mapping[str, str], source: Mapping[str, str],
              target: Mapping[str, str]) -> Tuple[Dict[str, str], List[Conflict]]:
    """Merge three ``path -> blob id`` maps.

    A path missing from a side counts as deleted there. Returns the merged
    mapping and the ``(path, source_id, target_id)`` conflicts.
    """
    merged = {}
    conflicts = []

    for path in sorted(set(base) | set(source) | set(target)):
        base_id = base.get(path)
        source_id = source.get(path)
        target_id = target.get(path)

        if source_id == target_id:
            # Unchanged, or changed identically on both sides
            result = source_id
        elif source_id == base_id:
            # Only changed in target
            result = target_id
        elif target_id == base_id:
            # Only changed in source
            result = source_id
        else:
            conflicts.append((path, source_id, target_id))
            continue

        if result is not None:
            merged[path] = result

    return merged, conflicts

class MergeEngine:
    """Joins a source revision into a target branch."""

    def __init__(self, repository):
        self.repo = repository

    def merge(self, source: str, target: str, author: Optional[str] = None,
              message: Optional[str] = None) -> MergeResult:
        repo = self.repo
        source_tip = repo.refs.resolve(source)
        target_tip = repo.refs.branch_tip(target)
        if target_tip is None:
            raise UnknownReference(f"'{target}' is not a branch")
        repo.ensure_clean()

        graph = repo.graph
        base_id = graph.merge_base(source_tip, target_tip)
        if base_id == source_tip:
            # Source is already part of target's history
            logger.debug("Merge of %s into %s is up to date", source, target)
            changes = None
            if repo.refs.current_branch() != target:
                changes = repo.checkout_engine.checkout(target).changes
            return MergeResult(target_tip, graph.get(target_tip).tree_id, base_id,
                               up_to_date=True, changes=changes)

        base_files = repo.trees.expand(graph.get(base_id).tree_id)
        source_files = repo.trees.expand(graph.get(source_tip).tree_id)
        target_files = repo.trees.expand(graph.get(target_tip).tree_id)

        merged_files, conflicts = reconcile(base_files, source_files, target_files)
        if conflicts:
            logger.debug("Merge of %s into %s conflicts on %d paths", source, target, len(conflicts))
            raise MergeConflict(conflicts)

        tree_id = repo.trees.build_from_ids(merged_files)
        revision_id = graph.create(
            tree_id,
            message or f"Merge {source} into {target}",
            repo.config.author(author),
            main_parent=target_tip,
            merge_parent=source_tip,
        )

        current_files = repo.head_files()
        repo.checkout_engine.check_untracked(current_files, merged_files)
        repo.refs.set_branch_tip(target, revision_id)
        changes = repo.checkout_engine.apply(current_files, merged_files)
        repo.refs.point_head_at_branch(target)
        logger.debug("Merged %s into %s as %s", source, target, revision_id[:8])
        return MergeResult(revision_id, tree_id, base_id, changes=changes)
