"""Pull command implementation."""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class PullCommand(BaseCommand):
    """Replace this repository with a copy of another one."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser("pull", help="Pull changes from another repository")
        parser.add_argument("source", help="Path of the repository to pull from")
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        self.execute(args.source)
    
    def execute(self, source: str) -> None:
        self.repo.pull(source)
        print(f"Pulled {source}")
