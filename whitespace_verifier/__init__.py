"""
Whitespace Verifier

Checks the spacing around punctuation, operators and parenthesized groups
in an already parsed token tree.
"""

__version__ = "1.0.0"
__author__ = "afreitas <afreitas@student.42.fr>"

from .core.verifier import WhitespaceVerifier
from .core.printer import Printer
from .core.walker import TreeWalker
from .core.tree import load_tree

__all__ = [
    'WhitespaceVerifier',
    'Printer',
    'TreeWalker',
    'load_tree'
]
