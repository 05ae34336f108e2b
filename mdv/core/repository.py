"""
Main repository implementation.

``MDV`` executes one already validated command per method call. It reloads
the staging area at the start of each command, persists it at the end, and
returns values instead of printing; errors are raised as ``MDVError``
subclasses.
"""
import logging
from pathlib import Path
from typing import Dict, List, Optional
from ..exceptions import (
    InvalidPath, NoCommitsYet, NotFound, NothingStaged, NotTracked, RepositoryError,
    UncommittedChanges, UntrackedFile,
)
from .checkout import CheckoutEngine, CheckoutResult
from .config import Config
from .fs import MDV_DIR, copy_repository, read_bytes, working_files
from .history import RevisionGraph
from .index import Index
from .merge import MergeEngine, MergeResult
from .objects import Blob, Revision, load_blob
from .refs import Head, RefManager
from .store import ObjectStore
from .tree import TreeBuilder, TreeDiff, diff_files

logger = logging.getLogger(__name__)

class Status:
    """Snapshot of the working directory relative to HEAD."""

    def __init__(self, head: Head, staged: List[str], modified: List[str],
                 deleted: List[str], untracked: List[str]):
        self.head = head
        self.staged = staged
        self.modified = modified
        self.deleted = deleted
        self.untracked = untracked

    @property
    def clean(self) -> bool:
        return not (self.staged or self.modified or self.deleted)

class MDV:
    """Main MDV repository class."""

    def __init__(self, repo_path: str = "."):
        self.repo_path = Path(repo_path).resolve()
        self.mdv_dir = self.repo_path / MDV_DIR
        self.objects_dir = self.mdv_dir / "objects"

        self.store = ObjectStore(self.objects_dir)
        self.trees = TreeBuilder(self.store)
        self.graph = RevisionGraph(self.store)
        self.refs = RefManager(self.mdv_dir, self.store)
        self.index = Index(self.mdv_dir)
        self.config = Config(self.mdv_dir)
        self.checkout_engine = CheckoutEngine(self)
        self.merge_engine = MergeEngine(self)

    @staticmethod
    def is_repository(path) -> bool:
        return (Path(path) / MDV_DIR).is_dir()

    def _ensure_repo_exists(self):
        """Check if repository exists and raise error if not."""
        if not self.is_repository(self.repo_path):
            raise RepositoryError("Not a MDV repository. Run 'mdv init' first.")

    def _begin(self):
        self._ensure_repo_exists()
        self.index.load()

    def _normalize_path(self, file_path: str) -> str:
        """Turn a user path into a repository-relative POSIX path."""
        abs_path = (self.repo_path / file_path).resolve()
        try:
            rel_path = abs_path.relative_to(self.repo_path).as_posix()
        except ValueError:
            raise NotFound(f"'{file_path}' is outside repository at '{self.repo_path}'")
        if rel_path == MDV_DIR or rel_path.startswith(MDV_DIR + "/"):
            raise NotFound(f"'{file_path}' is inside the repository directory")
        return self._check_storable(rel_path)

    @staticmethod
    def _check_storable(rel_path: str) -> str:
        """Reject names a tree object cannot record."""
        if "\n" in rel_path:
            raise InvalidPath(rel_path, "newline in name")
        try:
            rel_path.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidPath(rel_path, "name is not valid UTF-8") from e
        return rel_path

    def read_working_file(self, rel_path: str) -> bytes:
        return read_bytes(self.repo_path / rel_path)

    def _working_id(self, rel_path: str) -> Optional[str]:
        full_path = self.repo_path / rel_path
        if not full_path.is_file():
            return None
        return Blob(self.read_working_file(rel_path)).id

    def head(self) -> Head:
        self._ensure_repo_exists()
        return self.refs.head()

    def head_files(self) -> Dict[str, str]:
        """Tracked ``path -> blob id`` of HEAD, empty before the first commit."""
        revision_id = self.refs.head_revision()
        if revision_id is None:
            return {}
        return self.trees.expand(self.graph.get(revision_id).tree_id)

    def dirty_paths(self) -> List[str]:
        """Staged paths plus tracked files whose content differs from HEAD."""
        dirty = set(self.index.list())
        for path, blob_id in self.head_files().items():
            if self._working_id(path) != blob_id:
                dirty.add(path)
        return sorted(dirty)

    def is_clean(self) -> bool:
        self._begin()
        return not self.dirty_paths()

    def ensure_clean(self):
        dirty = self.dirty_paths()
        if dirty:
            raise UncommittedChanges("You have uncommitted changes", dirty)

    def init(self) -> bool:
        """Initialize a new repository. Returns False if one already exists."""
        if self.mdv_dir.exists():
            logger.debug("Repository already exists at %s", self.mdv_dir)
            return False

        self.objects_dir.mkdir(parents=True)
        self.refs.heads_dir.mkdir(parents=True)
        self.config.write_defaults()
        self.refs.point_head_at_branch(self.config.default_branch)
        self.index.clear()
        self.index.save()
        logger.debug("Initialized repository at %s", self.mdv_dir)
        return True

    def clone(self, source: str) -> Head:
        """Copy the repository at ``source`` into this (empty) location."""
        source_path = Path(source).resolve()
        if not self.is_repository(source_path):
            raise RepositoryError(f"'{source}' is not a MDV repository")
        if self.is_repository(self.repo_path):
            raise RepositoryError(f"'{self.repo_path}' already contains a repository")
        self._check_not_nested(source_path, self.repo_path)
        copy_repository(source_path, self.repo_path)
        return self.refs.head()

    def pull(self, source: str) -> Head:
        """Overwrite this repository with a copy of the one at ``source``."""
        self._begin()
        source_path = Path(source).resolve()
        if not self.is_repository(source_path):
            raise RepositoryError(f"'{source}' is not a MDV repository")
        self.ensure_clean()
        self._check_not_nested(source_path, self.repo_path)
        copy_repository(source_path, self.repo_path)
        return self.refs.head()

    def push(self, destination: str):
        """Copy this repository over the location ``destination``."""
        self._begin()
        self.ensure_clean()
        destination_path = Path(destination).resolve()
        if self.is_repository(destination_path) and not MDV(destination_path).is_clean():
            raise UncommittedChanges(f"Destination '{destination}' has uncommitted changes")
        self._check_not_nested(self.repo_path, destination_path)
        copy_repository(self.repo_path, destination_path)

    @staticmethod
    def _check_not_nested(source: Path, destination: Path):
        if source == destination or source in destination.parents or destination in source.parents:
            raise RepositoryError(f"Cannot copy between nested locations '{source}' and '{destination}'")

    def add(self, file_paths: List[str]) -> List[str]:
        """Stage files, expanding directories. Returns the newly staged paths."""
        self._begin()
        tracked = self.head_files()

        to_stage = []
        for file_path in file_paths:
            normalized_path = self._normalize_path(file_path)
            full_path = self.repo_path / normalized_path
            if full_path.is_file():
                to_stage.append(normalized_path)
            elif full_path.is_dir():
                prefix = "" if normalized_path == "." else normalized_path + "/"
                found = sorted(self._check_storable(prefix + p) for p in working_files(full_path))
                # Tracked files deleted from the directory are staged for removal
                found += sorted(p for p in tracked if p.startswith(prefix) and p not in found
                                and not (self.repo_path / p).exists())
                if not found:
                    raise NotFound(f"pathspec '{file_path}' did not match any files")
                to_stage.extend(found)
            elif normalized_path in tracked:
                to_stage.append(normalized_path)
            else:
                raise NotFound(f"pathspec '{file_path}' did not match any files")

        added = [path for path in to_stage if self.index.add(path)]
        self.index.save()
        return added

    def remove(self, file_paths: List[str]) -> List[str]:
        """Unstage paths; fails with NotTracked before changing anything."""
        self._begin()
        normalized = [self._normalize_path(p) for p in file_paths]
        for path in normalized:
            if path not in self.index:
                raise NotTracked(path)
        for path in dict.fromkeys(normalized):
            self.index.remove(path)
        self.index.save()
        return normalized

    def commit(self, message: str, author: Optional[str] = None,
               paths: Optional[List[str]] = None) -> str:
        """Snapshot staged paths on top of HEAD and advance it."""
        self._begin()
        if paths is None:
            to_commit = self.index.list()
        else:
            to_commit = list(dict.fromkeys(self._normalize_path(p) for p in paths))
        if not to_commit:
            raise NothingStaged("Nothing staged to commit")

        files = self.head_files()
        for path in to_commit:
            if path not in self.index:
                raise UntrackedFile(path)
            if not (self.repo_path / path).is_file() and path not in files:
                raise NotFound(f"Staged file '{path}' no longer exists")

        for path in to_commit:
            full_path = self.repo_path / path
            if full_path.is_file():
                files[path] = Blob(self.read_working_file(path)).store(self.store)
            else:
                del files[path]

        tree_id = self.trees.build_from_ids(files)
        main_parent = self.refs.head_revision()
        revision_id = self.graph.create(tree_id, message, self.config.author(author),
                                        main_parent=main_parent)
        self.refs.advance_head(revision_id)
        self.index.discard(to_commit)
        self.index.save()
        return revision_id

    def cat(self, file_path: str, revision: str) -> bytes:
        """Content of ``file_path`` as recorded in ``revision``."""
        self._ensure_repo_exists()
        revision_id = self.refs.resolve(revision)
        path = self._normalize_path(file_path)
        files = self.trees.expand(self.graph.get(revision_id).tree_id)
        if path not in files:
            raise NotFound(f"'{path}' does not exist in revision {revision_id[:8]}")
        return load_blob(self.store, files[path])

    def checkout(self, ref: str) -> CheckoutResult:
        self._begin()
        return self.checkout_engine.checkout(ref)

    def diff(self, rev1: str, rev2: str) -> TreeDiff:
        """Whole-file changes going from ``rev1`` to ``rev2``."""
        self._ensure_repo_exists()
        old = self.trees.expand(self.graph.get(self.refs.resolve(rev1)).tree_id)
        new = self.trees.expand(self.graph.get(self.refs.resolve(rev2)).tree_id)
        return diff_files(old, new)

    def create_branch(self, name: str) -> str:
        """Create ``name`` at HEAD and switch to it."""
        self._ensure_repo_exists()
        tip = self.refs.head_revision()
        if tip is None:
            raise NoCommitsYet(f"Not a valid object name: '{self.refs.current_branch()}'")
        self.refs.create_branch(name, tip)
        self.refs.point_head_at_branch(name)
        return tip

    def merge(self, source: str, target: str, author: Optional[str] = None,
              message: Optional[str] = None) -> MergeResult:
        self._begin()
        return self.merge_engine.merge(source, target, author, message)

    def status(self) -> Status:
        self._begin()
        tracked = self.head_files()
        staged = self.index.list()
        on_disk = working_files(self.repo_path)

        modified = []
        deleted = []
        for path, blob_id in sorted(tracked.items()):
            if path not in on_disk:
                deleted.append(path)
            elif self._working_id(path) != blob_id:
                modified.append(path)
        untracked = sorted(p for p in on_disk if p not in tracked and p not in self.index)
        return Status(self.refs.head(), staged, modified, deleted, untracked)

    def heads(self) -> Dict[str, str]:
        self._ensure_repo_exists()
        return self.refs.heads()

    def log(self, ref: Optional[str] = None, limit: Optional[int] = None) -> List[Revision]:
        """Main-parent history from ``ref`` (default HEAD), newest first."""
        self._ensure_repo_exists()
        start = self.refs.resolve(ref) if ref else self.refs.head_revision()
        return self.graph.log(start, limit)
