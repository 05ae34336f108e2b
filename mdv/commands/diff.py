"""Diff command implementation."""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class DiffCommand(BaseCommand):
    """Show which files changed between two revisions."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser('diff', help='Check changes between revisions')
        parser.add_argument('rev1', help='Old revision')
        parser.add_argument('rev2', help='New revision')
        return parser
    
    def execute_from_args(self, args: Any):
        self.execute(args.rev1, args.rev2)
    
    def execute(self, rev1: str, rev2: str):
        changes = self.repo.diff(rev1, rev2)
        for path in changes.added:
            print(f"A\t{path}")
        for path in changes.modified:
            print(f"M\t{path}")
        for path in changes.removed:
            print(f"D\t{path}")
