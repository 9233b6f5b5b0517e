"""
Core modules for token positions, tree navigation and whitespace verification.
"""

from .position import Token, Location
from .tree import InMemoryTree, Leaf, Node, load_tree
from .printer import Printer, Violation
from .verifier import WhitespaceVerifier
from .walker import TreeWalker
from .config import CheckerConfig

__all__ = [
    'Token',
    'Location',
    'InMemoryTree',
    'Leaf',
    'Node',
    'load_tree',
    'Printer',
    'Violation',
    'WhitespaceVerifier',
    'TreeWalker',
    'CheckerConfig'
]
