"""Clone command implementation."""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class CloneCommand(BaseCommand):
    """Copy an existing repository."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser("clone", help="Copy an existing repository")
        parser.add_argument("source", help="Path of the repository to copy")
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        self.execute(args.source)
    
    def execute(self, source: str) -> None:
        head = self.repo.clone(source)
        print(f"Cloned {source} into {self.repo.repo_path}")
        if head.branch:
            print(f"On branch {head.branch}")
