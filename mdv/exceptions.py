"""
Custom exceptions for MDV.
"""
from typing import List, Optional, Tuple

class MDVError(Exception):
    """Base exception for all MDV errors."""
    pass

class RepositoryError(MDVError):
    """Raised when the repository itself is missing or misplaced."""
    pass

class StorageFailure(MDVError):
    """Raised when an underlying read or write fails."""
    pass

class ObjectError(MDVError):
    """Raised when object operations fail."""
    pass

class NotFound(ObjectError):
    """Raised when an object or path lookup misses."""
    pass

class UnknownReference(MDVError):
    """Raised when a branch name or revision id does not resolve."""
    pass

class StagingError(MDVError):
    """Raised when a staging precondition is violated."""
    pass

class NothingStaged(StagingError):
    pass

class UntrackedFile(StagingError):
    def __init__(self, path: str):
        super().__init__(f"'{path}' is not staged")
        self.path = path

class NotTracked(StagingError):
    def __init__(self, path: str):
        super().__init__(f"pathspec '{path}' did not match any staged file")
        self.path = path

class InvalidPath(StagingError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid path {path!r}: {reason}")
        self.path = path

class UncommittedChanges(MDVError):
    """Raised when an operation would discard local changes."""

    def __init__(self, message: str = "You have uncommitted changes", paths: Optional[List[str]] = None):
        self.paths = sorted(paths or [])
        if self.paths:
            message = f"{message}: {', '.join(self.paths)}"
        super().__init__(message)

class BranchError(MDVError):
    """Raised when branch operations fail."""
    pass

class BranchExists(BranchError):
    def __init__(self, name: str):
        super().__init__(f"A branch named '{name}' already exists")
        self.name = name

class NoCommitsYet(BranchError):
    pass

class MergeError(MDVError):
    """Raised when merge operations fail."""
    pass

class Unrelated(MergeError):
    pass

class MergeConflict(MergeError):
    """Raised when both sides changed the same paths differently.

    ``conflicts`` holds ``(path, source_id, target_id)`` triples; an id is
    ``None`` when that side deleted the path.
    """

    def __init__(self, conflicts: List[Tuple[str, Optional[str], Optional[str]]]):
        self.conflicts = sorted(conflicts, key=lambda c: c[0])
        self.paths = [path for path, _, _ in self.conflicts]
        super().__init__(f"Merge conflict in: {', '.join(self.paths)}")
