"""
Checkout engine: materializes a revision's tree into the working directory.
"""
import logging
import os
import shutil
import tempfile
from pathlib import PurePosixPath
from typing import Mapping, Optional
from ..exceptions import StorageFailure, UncommittedChanges
from .fs import remove_file, working_files
from .objects import Blob, load_blob
from .tree import TreeDiff, diff_files

logger = logging.getLogger(__name__)

class CheckoutResult:
    """What a checkout did: the revision reached and the files it touched."""

    def __init__(self, revision_id: str, branch: Optional[str], changes: TreeDiff):
        self.revision_id = revision_id
        self.branch = branch
        self.changes = changes

    @property
    def detached(self) -> bool:
        return self.branch is None

class CheckoutEngine:
    """Moves HEAD and the working directory between revisions."""

    def __init__(self, repository):
        self.repo = repository

    def checkout(self, target_ref: str) -> CheckoutResult:
        repo = self.repo
        target_id = repo.refs.resolve(target_ref)
        repo.ensure_clean()

        current_files = repo.head_files()
        target_files = repo.trees.expand(repo.graph.get(target_id).tree_id)
        self.check_untracked(current_files, target_files)
        changes = self.apply(current_files, target_files)

        if repo.refs.is_branch(target_ref):
            repo.refs.point_head_at_branch(target_ref)
            branch = target_ref
        else:
            repo.refs.detach_head(target_id)
            branch = None
        logger.debug("Checked out %s (%s)", target_ref, target_id[:8])
        return CheckoutResult(target_id, branch, changes)

    def check_untracked(self, current_files: Mapping[str, str], target_files: Mapping[str, str]):
        """Refuse to overwrite untracked working files with different content.

        Tracked files missing from the target are removed before anything is
        written, so a directory is only in the way while it holds untracked
        files. A file sitting where the target needs a directory is always in
        the way unless it is tracked.
        """
        root = self.repo.repo_path
        clobbered = set()
        for path in target_files.keys() - current_files.keys():
            full_path = root / path
            if full_path.is_dir():
                if any(f"{path}/{name}" not in current_files for name in working_files(full_path)):
                    clobbered.add(path)
            elif full_path.is_file():
                if Blob(self.repo.read_working_file(path)).id != target_files[path]:
                    clobbered.add(path)
            for parent in PurePosixPath(path).parents:
                parent_name = parent.as_posix()
                if parent_name == "." or parent_name in current_files:
                    continue
                parent_path = root / parent_name
                if parent_path.exists() and not parent_path.is_dir():
                    clobbered.add(parent_name)
        if clobbered:
            raise UncommittedChanges("Untracked working files would be overwritten", sorted(clobbered))

    def apply(self, current_files: Mapping[str, str], target_files: Mapping[str, str]) -> TreeDiff:
        """Turn a working directory holding ``current_files`` into ``target_files``.

        Unchanged paths are not touched.
        """
        changes = diff_files(current_files, target_files)
        for path in changes.removed:
            remove_file(self.repo.repo_path, path)
            logger.debug("Removed %s", path)
        for path in changes.added + changes.modified:
            self._write_file(path, target_files[path])
            logger.debug("Wrote %s", path)
        return changes

    def _write_file(self, path: str, blob_id: str):
        content = load_blob(self.repo.store, blob_id)
        full_path = self.repo.repo_path / path
        temp_name = None
        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            if full_path.is_dir():
                # Only emptied directories are left here once removals ran
                shutil.rmtree(full_path)
            fd, temp_name = tempfile.mkstemp(prefix=f".{full_path.name}.", suffix=".mdv-tmp",
                                             dir=full_path.parent)
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            os.replace(temp_name, full_path)
        except OSError as e:
            if temp_name and os.path.exists(temp_name):
                os.unlink(temp_name)
            raise StorageFailure(f"Failed to write {path}: {e}") from e
