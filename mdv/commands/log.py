"""Log command implementation."""
import time
from argparse import ArgumentParser, _SubParsersAction
from datetime import datetime
from typing import Any, Optional
from .base import BaseCommand

class LogCommand(BaseCommand):
    """Show commit history."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        """Register log command parser."""
        parser = subparsers.add_parser('log', help='View the change log')
        parser.add_argument("ref", nargs="?", help="Branch or revision to start from (default: HEAD)")
        parser.add_argument("-n", "--max-count", type=int, dest="max_count", help="Maximum number of commits to show")
        parser.add_argument("--oneline", action="store_true", help="Show each commit on a single line")
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        """Execute log command from parsed arguments."""
        self.execute(args.ref, args.max_count, args.oneline)
    
    def execute(self, ref: Optional[str] = None, max_count: Optional[int] = None,
                oneline: bool = False) -> None:
        """Show commit history."""
        revisions = self.repo.log(ref, max_count)
        if not revisions:
            print("No commits found")
            return
        
        for revision in revisions:
            if oneline:
                message = revision.message.split('\n')[0]
                print(f"{revision.id[:7]} {message}")
                continue
            
            print(f"commit {revision.id}")
            if revision.merge_parent:
                print(f"Merge: {revision.main_parent[:7]} {revision.merge_parent[:7]}")
            print(f"Author: {revision.author}")
            # Format date like Git: "Sat Aug 16 13:43:18 2025 -0500"
            dt = datetime.fromtimestamp(revision.timestamp)
            tz_offset = time.strftime("%z") or "+0000"
            print(f"Date:   {dt.strftime('%a %b %d %H:%M:%S %Y ')}{tz_offset}")
            print()
            for line in revision.message.split('\n'):
                print(f"    {line}")
            print()
