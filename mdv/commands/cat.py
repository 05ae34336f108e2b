"""Cat command implementation."""
import sys
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class CatCommand(BaseCommand):
    """Print a file as recorded in a revision."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser("cat", help="Inspect a file of a given revision")
        parser.add_argument("file", help="File path")
        parser.add_argument("revision", help="Branch name or revision id")
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        self.execute(args.file, args.revision)
    
    def execute(self, file_path: str, revision: str) -> None:
        content = self.repo.cat(file_path, revision)
        sys.stdout.buffer.write(content)
        sys.stdout.flush()
