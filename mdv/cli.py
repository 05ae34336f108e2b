"""
Command Line Interface for MDV.
"""
import argparse
import logging
import sys
from typing import List, Optional
from .core.repository import MDV

class CustomHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that suppresses subcommand help in main help."""
    def _format_action(self, action):
        # Skip subparsers action to avoid showing individual command help
        if isinstance(action, argparse._SubParsersAction):
            return ''
        return super()._format_action(action)
from .commands import (
    InitCommand, CloneCommand, AddCommand, RemoveCommand, CommitCommand,
    CatCommand, CheckoutCommand, DiffCommand, BranchCommand, MergeCommand,
    PullCommand, PushCommand, StatusCommand, HeadsCommand, LogCommand
)
from .exceptions import MDVError

COMMANDS = {
    "init": InitCommand,
    "clone": CloneCommand,
    "add": AddCommand,
    "remove": RemoveCommand,
    "commit": CommitCommand,
    "cat": CatCommand,
    "checkout": CheckoutCommand,
    "diff": DiffCommand,
    "branch": BranchCommand,
    "merge": MergeCommand,
    "pull": PullCommand,
    "push": PushCommand,
    "status": StatusCommand,
    "heads": HeadsCommand,
    "log": LogCommand,
}

def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        description="MDV - local version control",
        prog="mdv",
        formatter_class=CustomHelpFormatter,
        epilog="""These are common MDV commands used in various situations:

start a working area
   init      Create an empty repository
   clone     Copy an existing repository

work on the current change
   add       Add files to the staging area
   remove    Remove files from the staging area

examine the history and state
   cat       Inspect a file of a given revision
   diff      Check which files changed between revisions
   heads     Show the current heads
   log       View the change log
   status    Check the current status of the repository

grow and combine history
   branch    Create a new branch and switch to it
   checkout  Check out a branch or revision
   commit    Commit staged changes as a new revision
   merge     Merge a source branch into a target branch

share with another repository
   pull      Pull changes from another repository
   push      Push changes into another repository

See 'mdv <command> --help' to read about a specific command."""
    )
    parser.add_argument(
        "--repo", 
        default=".", 
        help="Repository path (default: current directory)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log internal operations to stderr"
    )
    parser.add_argument(
        "--version", 
        action="version", 
        version=f"%(prog)s {__import__('mdv').__version__}"
    )
    
    subparsers = parser.add_subparsers(
        dest="command", 
        help="MDV command to run (see command list below)",
        metavar="<command>"
    )
    
    # Register all commands
    for command_class in COMMANDS.values():
        command_class.register_parser(subparsers)
    
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    
    if not args.command:
        parser.print_help()
        return 0
    
    try:
        # Create repository instance
        mdv = MDV(args.repo)
        command = COMMANDS[args.command](mdv)
        command.execute_from_args(args)
    except MDVError as e:
        print(f"fatal: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    return 0

if __name__ == "__main__":
    sys.exit(main())
