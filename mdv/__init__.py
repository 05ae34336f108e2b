"""
MDV - a local version-control engine.
Content-addressed object store, revision graph, staging and branch state.
"""
__version__ = "0.3.0"
__author__ = "MDV"
__description__ = "Local content-addressed version control with branches and three-way merge"
from .core.repository import MDV
from .exceptions import MDVError, RepositoryError, ObjectError, NotFound, MergeConflict
__all__ = [
    "MDV",
    "MDVError",
    "RepositoryError",
    "ObjectError",
    "NotFound",
    "MergeConflict",
    "__version__"
]
