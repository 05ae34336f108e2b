"""Branch command implementation."""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class BranchCommand(BaseCommand):
    """Create a branch and switch to it."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        """Register branch command parser."""
        parser = subparsers.add_parser('branch', help='Create a new branch and switch to it')
        parser.add_argument("name", help="Branch name to create")
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        """Execute branch command from parsed arguments."""
        self.execute(args.name)
    
    def execute(self, branch_name: str) -> None:
        """Create a branch at HEAD."""
        tip = self.repo.create_branch(branch_name)
        print(f"Switched to a new branch '{branch_name}' at {tip[:8]}")
