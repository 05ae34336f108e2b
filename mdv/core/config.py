"""
Repository configuration stored in ``.mdv/config``.
"""
import configparser
import io
import os
from pathlib import Path
from typing import Optional
from ..exceptions import StorageFailure
from .fs import atomic_write

DEFAULT_BRANCH = "main"
DEFAULT_AUTHOR = "MDV User"
AUTHOR_ENV = "MDV_AUTHOR"

class Config:
    """Reads and writes the repository's INI configuration."""

    def __init__(self, mdv_dir: Path):
        self.config_file = Path(mdv_dir) / "config"

    def read(self) -> configparser.ConfigParser:
        parser = configparser.ConfigParser()
        if self.config_file.exists():
            try:
                parser.read(self.config_file, encoding='utf-8')
            except configparser.Error as e:
                raise StorageFailure(f"Invalid config file: {e}") from e
        return parser

    def write_defaults(self, default_branch: str = DEFAULT_BRANCH):
        parser = configparser.ConfigParser()
        parser["core"] = {"repositoryformatversion": "0"}
        parser["init"] = {"defaultbranch": default_branch}
        self._write(parser)

    def set(self, key: str, value: str):
        try:
            section, option = key.split('.', 1)
        except ValueError:
            raise ValueError("Invalid key format. Should be 'section.key'.")
        parser = self.read()
        if not parser.has_section(section):
            parser.add_section(section)
        parser.set(section, option, value)
        self._write(parser)

    def get(self, key: str, fallback: Optional[str] = None) -> Optional[str]:
        section, option = key.split('.', 1)
        return self.read().get(section, option, fallback=fallback)

    def _write(self, parser: configparser.ConfigParser):
        buffer = io.StringIO()
        parser.write(buffer)
        atomic_write(self.config_file, buffer.getvalue().encode())

    @property
    def default_branch(self) -> str:
        return self.get("init.defaultbranch", DEFAULT_BRANCH)

    def author(self, explicit: Optional[str] = None) -> str:
        """Explicit value, then ``MDV_AUTHOR``, then ``user.name``."""
        if explicit:
            return explicit
        return os.environ.get(AUTHOR_ENV) or self.get("user.name") or DEFAULT_AUTHOR
