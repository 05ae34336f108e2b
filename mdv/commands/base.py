"""
Base command class for MDV commands.
"""
from abc import ABC, abstractmethod
from argparse import ArgumentParser, _SubParsersAction
from typing import Any, Iterable
from ..core.repository import MDV

class BaseCommand(ABC):
    """Base class for all MDV commands.

    Commands wrap one ``MDV`` method each and are the only place that prints.
    """
    
    def __init__(self, repository: MDV):
        self.repo = repository
    
    @classmethod
    @abstractmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        """Register command parser with subparsers."""
        pass
    
    @abstractmethod
    def execute_from_args(self, args: Any) -> None:
        """Execute command from parsed arguments."""
        pass

    @staticmethod
    def print_paths(verb: str, paths: Iterable[str]) -> None:
        for path in paths:
            print(f"{verb} '{path}'")
