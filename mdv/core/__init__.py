"""
Core MDV modules.
"""
from .repository import MDV, Status
from .store import ObjectStore
from .objects import MDVObject, Blob, Tree, Revision
from .tree import TreeBuilder, TreeDiff
from .index import Index
from .refs import Head, RefManager
from .history import RevisionGraph
from .checkout import CheckoutEngine, CheckoutResult
from .merge import MergeEngine, MergeResult
__all__ = [
    "MDV",
    "Status",
    "ObjectStore",
    "MDVObject",
    "Blob",
    "Tree",
    "Revision",
    "TreeBuilder",
    "TreeDiff",
    "Index",
    "Head",
    "RefManager",
    "RevisionGraph",
    "CheckoutEngine",
    "CheckoutResult",
    "MergeEngine",
    "MergeResult",
]
