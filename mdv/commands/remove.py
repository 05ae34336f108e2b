"""Remove command implementation."""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any, List
from .base import BaseCommand

class RemoveCommand(BaseCommand):
    """Remove files from the staging area."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser("remove", help="Remove files from staging area")
        parser.add_argument("files", nargs="+", help="Staged files to remove")
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        self.execute(args.files)
    
    def execute(self, files: List[str]) -> None:
        self.print_paths("unstaged", self.repo.remove(files))
