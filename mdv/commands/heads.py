"""Heads command implementation."""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class HeadsCommand(BaseCommand):
    """List branches and where HEAD points."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser("heads", help="Show the current heads")
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        self.execute()
    
    def execute(self) -> None:
        head = self.repo.head()
        if head.detached:
            print(f"* (HEAD detached at {head.revision_id[:8]})")
        for name, tip in self.repo.heads().items():
            prefix = "* " if name == head.branch else "  "
            print(f"{prefix}{name} {tip[:8]}")
        if head.branch and head.revision_id is None:
            print(f"* {head.branch} (no commits yet)")
