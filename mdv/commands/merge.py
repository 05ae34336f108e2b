"""Merge command implementation."""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any, Optional
from .base import BaseCommand
from ..exceptions import MergeConflict

class MergeCommand(BaseCommand):
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser('merge', help='Merge a source branch into a target branch')
        parser.add_argument('source', help='Branch or revision to merge from')
        parser.add_argument('target', help='Branch to merge into')
        parser.add_argument('-m', '--message',
                          help='Set the commit message to be used for the merge commit')
        parser.add_argument('--author', help='Override the merge commit author')
        return parser
    
    def execute_from_args(self, args: Any):
        self.execute(args.source, args.target, args.message, args.author)
    
    def execute(self, source: str, target: str, message: Optional[str] = None,
                author: Optional[str] = None):
        try:
            result = self.repo.merge(source, target, author, message)
        except MergeConflict as e:
            print("CONFLICT (content): Merge conflict in the following files:")
            for file_path in e.paths:
                print(f"\t{file_path}")
            raise
        if result.up_to_date:
            print("Already up to date.")
            return
        print(f"Merge made from {source} into {target}: {result.revision_id[:8]}")
