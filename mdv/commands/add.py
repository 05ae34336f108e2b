"""
Add command implementation.
"""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any, List
from .base import BaseCommand

class AddCommand(BaseCommand):
    """Stage files, or whole directories, for the next commit."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser(
            "add",
            help="Add files to staging area"
        )
        parser.add_argument(
            "files", 
            nargs="+", 
            help="Files or directories to add; a deleted tracked file stages its removal"
        )
        parser.add_argument(
            "-q", "--quiet",
            action="store_true",
            help="Do not list newly staged paths"
        )
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        self.execute(args.files, quiet=args.quiet)
    
    def execute(self, files: List[str], quiet: bool = False) -> None:
        """Stage ``files`` and list the paths that were not staged before."""
        staged = self.repo.add(files)
        if not quiet:
            self.print_paths("add", staged)
