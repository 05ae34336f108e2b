"""
Status command implementation.
"""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class StatusCommand(BaseCommand):
    """Show repository status."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        """Register status command parser."""
        parser = subparsers.add_parser(
            "status",
            help="Show repository status"
        )
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        """Execute status command from parsed arguments."""
        self.execute()
    
    def execute(self) -> None:
        """Show repository status."""
        status = self.repo.status()
        head = status.head
        if head.detached:
            print(f"HEAD detached at {head.revision_id[:7]}")
        else:
            print(f"On branch {head.branch}")
        if head.revision_id is None:
            print("\nNo commits yet")
        
        if status.staged:
            print("\nChanges to be committed:")
            print('  (use "mdv remove <file>..." to unstage)')
            for file_path in status.staged:
                print(f"\t{file_path}")
        
        if status.modified or status.deleted:
            print("\nChanges not staged for commit:")
            print("  (use 'mdv add <file>...' to update what will be committed)")
            for file_path in status.modified:
                print(f"\tmodified:   {file_path}")
            for file_path in status.deleted:
                print(f"\tdeleted:    {file_path}")
        
        if status.untracked:
            print("\nUntracked files:")
            print("  (use 'mdv add <file>...' to include in what will be committed)")
            for file_path in status.untracked:
                print(f"\t{file_path}")
        
        if status.clean and not status.untracked:
            print("\nnothing to commit, working tree clean")
