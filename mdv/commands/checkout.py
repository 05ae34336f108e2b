"""Checkout command implementation."""
import sys
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class CheckoutCommand(BaseCommand):
    """Switch to a branch or revision."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser('checkout', help='Check out a branch or revision')
        parser.add_argument('branch_or_commit', help='Branch name or revision id to check out')
        return parser
    
    def execute_from_args(self, args: Any):
        self.execute(args.branch_or_commit)
    
    def execute(self, target: str):
        result = self.repo.checkout(target)
        if result.detached:
            print(f"HEAD is now at {result.revision_id[:8]} (detached)", file=sys.stderr)
        else:
            print(f"Switched to branch '{result.branch}'", file=sys.stderr)
