"""
Branch and HEAD pointer management.

Each branch is a file under ``refs/heads`` holding its tip revision id.
``HEAD`` holds either ``ref: refs/heads/<branch>`` or a literal revision id
when detached. Every pointer is replaced atomically.
"""
import logging
from pathlib import Path
from typing import Dict, Optional
from ..exceptions import BranchExists, NotFound, StorageFailure, UnknownReference
from .fs import atomic_write
from .objects import load_revision
from .store import ObjectStore

logger = logging.getLogger(__name__)

HEAD_REF_PREFIX = "ref: refs/heads/"
MIN_PREFIX_LENGTH = 4

class Head:
    """Current position: a branch name or a detached revision id."""

    def __init__(self, branch: Optional[str], revision_id: Optional[str]):
        self.branch = branch
        self.revision_id = revision_id

    @property
    def detached(self) -> bool:
        return self.branch is None

    def __eq__(self, other):
        if not isinstance(other, Head):
            return NotImplemented
        return (self.branch, self.revision_id) == (other.branch, other.revision_id)

    def __repr__(self):
        return f"Head(branch={self.branch!r}, revision_id={self.revision_id!r})"

class RefManager:
    """Named mutable pointers into the revision graph."""

    def __init__(self, mdv_dir: Path, store: ObjectStore):
        self.store = store
        self.heads_dir = Path(mdv_dir) / "refs" / "heads"
        self.head_file = Path(mdv_dir) / "HEAD"

    def _read_text(self, path: Path) -> Optional[str]:
        if not path.is_file():
            return None
        try:
            with open(path, 'r') as f:
                return f.read().strip()
        except (IOError, OSError) as e:
            raise StorageFailure(f"Failed to read {path}: {e}") from e

    def _write_text(self, path: Path, text: str):
        atomic_write(path, (text + "\n").encode())

    def _branch_file(self, name: str) -> Path:
        parts = name.split("/")
        if not name or any(p in ("", ".", "..") for p in parts):
            raise UnknownReference(f"Invalid branch name: '{name}'")
        return self.heads_dir.joinpath(*parts)

    def head(self) -> Head:
        content = self._read_text(self.head_file)
        if not content:
            raise NotFound("HEAD is missing")
        if content.startswith(HEAD_REF_PREFIX):
            branch = content[len(HEAD_REF_PREFIX):]
            return Head(branch, self.branch_tip(branch))
        return Head(None, content)

    def head_revision(self) -> Optional[str]:
        return self.head().revision_id

    def current_branch(self) -> Optional[str]:
        return self.head().branch

    def branch_tip(self, name: str) -> Optional[str]:
        try:
            branch_file = self._branch_file(name)
        except UnknownReference:
            return None
        return self._read_text(branch_file) or None

    def _require_revision(self, revision_id: str):
        # Pointers may only name revisions that are already stored
        load_revision(self.store, revision_id)

    def set_branch_tip(self, name: str, revision_id: str):
        self._require_revision(revision_id)
        self._write_text(self._branch_file(name), revision_id)
        logger.debug("Branch %s -> %s", name, revision_id[:8])

    def create_branch(self, name: str, revision_id: str):
        if self.branch_tip(name) is not None:
            raise BranchExists(name)
        self.set_branch_tip(name, revision_id)

    def point_head_at_branch(self, name: str):
        self._branch_file(name)
        self._write_text(self.head_file, HEAD_REF_PREFIX + name)
        logger.debug("HEAD -> %s", name)

    def detach_head(self, revision_id: str):
        self._require_revision(revision_id)
        self._write_text(self.head_file, revision_id)
        logger.debug("HEAD detached at %s", revision_id[:8])

    def advance_head(self, revision_id: str):
        """Move whatever HEAD points at (its branch, or itself) to ``revision_id``."""
        branch = self.current_branch()
        if branch is None:
            self.detach_head(revision_id)
        else:
            self.set_branch_tip(branch, revision_id)

    def is_branch(self, name: str) -> bool:
        return self.branch_tip(name) is not None

    def resolve(self, ref: str) -> str:
        """Resolve a branch name, revision id or unique id prefix."""
        tip = self.branch_tip(ref)
        if tip:
            return tip

        candidates = []
        if len(ref) >= MIN_PREFIX_LENGTH:
            candidates = self.store.find(ref)
        revisions = []
        for candidate in candidates:
            try:
                load_revision(self.store, candidate)
            except NotFound:
                continue
            revisions.append(candidate)
        if len(revisions) == 1:
            return revisions[0]
        if len(revisions) > 1:
            raise UnknownReference(f"Ambiguous revision '{ref}'")
        raise UnknownReference(f"'{ref}' is not a branch or revision")

    def heads(self) -> Dict[str, str]:
        """Snapshot of every branch and its tip."""
        branches = {}
        if not self.heads_dir.exists():
            return branches
        for branch_file in sorted(self.heads_dir.rglob("*")):
            if not branch_file.is_file() or branch_file.name.startswith("."):
                continue
            name = branch_file.relative_to(self.heads_dir).as_posix()
            tip = self._read_text(branch_file)
            if tip:
                branches[name] = tip
        return branches
