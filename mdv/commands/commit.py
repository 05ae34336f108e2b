"""Commit command implementation."""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any, List, Optional
from .base import BaseCommand

class CommitCommand(BaseCommand):
    """Create a commit."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        """Register commit command parser."""
        parser = subparsers.add_parser("commit", help="Create a commit")
        parser.add_argument("-m", "--message", required=True, help="Commit message")
        parser.add_argument("--author", help="Override the commit author")
        parser.add_argument("paths", nargs="*", help="Commit only these staged paths")
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        """Execute commit command from parsed arguments."""
        self.execute(args.message, args.author, args.paths or None)
    
    def execute(self, message: str, author: Optional[str] = None,
                paths: Optional[List[str]] = None) -> None:
        """Create a commit."""
        revision_id = self.repo.commit(message, author, paths)
        revision = self.repo.graph.get(revision_id)
        head = self.repo.head()
        where = head.branch or "detached HEAD"
        root_commit_text = " (root-commit)" if revision.is_root else ""
        print(f"[{where}{root_commit_text} {revision_id[:7]}] {message}")
