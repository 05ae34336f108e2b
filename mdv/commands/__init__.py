"""
MDV command implementations.
"""
from .base import BaseCommand
from .init import InitCommand
from .clone import CloneCommand
from .add import AddCommand
from .remove import RemoveCommand
from .commit import CommitCommand
from .cat import CatCommand
from .checkout import CheckoutCommand
from .diff import DiffCommand
from .branch import BranchCommand
from .merge import MergeCommand
from .pull import PullCommand
from .push import PushCommand
from .status import StatusCommand
from .heads import HeadsCommand
from .log import LogCommand
__all__ = [
    "BaseCommand",
    "InitCommand",
    "CloneCommand",
    "AddCommand",
    "RemoveCommand",
    "CommitCommand",
    "CatCommand",
    "CheckoutCommand",
    "DiffCommand",
    "BranchCommand",
    "MergeCommand",
    "PullCommand",
    "PushCommand",
    "StatusCommand",
    "HeadsCommand",
    "LogCommand",
]
