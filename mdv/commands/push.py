"""Push command implementation."""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class PushCommand(BaseCommand):
    """Copy this repository over another location."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser("push", help="Push changes into another repository")
        parser.add_argument("destination", help="Path to push the repository to")
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        self.execute(args.destination)
    
    def execute(self, destination: str) -> None:
        self.repo.push(destination)
        print(f"Pushed to {destination}")
