"""
Tree Navigation Module

The verifiers only need a narrow view of the syntax tree: boundary tokens of
a node, its children and its left sibling. `TreeAdapter` names that view;
`InMemoryTree` implements it over plain `Leaf`/`Node` objects so trees can be
built by hand or loaded from a JSON dump.
"""

from typing import Dict, Iterator, List, Optional, Protocol, Set, Union
import logging

from .position import Location, Token, token_location

logger = logging.getLogger(__name__)

# Parenthesized groups: (open, content, close) or (open, close)
GROUP_KINDS = {'parenthesized', 'call_arguments'}


class TreeFormatError(ValueError):
    """Raised when a serialized tree cannot be turned into nodes."""


class Leaf:
    """A tree node wrapping a single token."""

    def __init__(self, token: Token, kind: str = "token"):
        self.token = token
        self.kind = kind

    @property
    def children(self) -> List["TreeNode"]:
        return []

    def __repr__(self):
        return f"Leaf({self.token.text!r}, kind='{self.kind}')"


class Node:
    """An ordered, fixed-arity grouping of child nodes."""

    def __init__(self, kind: str, children: List["TreeNode"]):
        self.kind = kind
        self.children = list(children)

    def __repr__(self):
        return f"Node(kind='{self.kind}', children={len(self.children)})"


TreeNode = Union[Leaf, Node]


class TreeAdapter(Protocol):
    """Navigation capabilities the whitespace verifiers rely on."""

    def first_token(self, node: TreeNode) -> Token: ...

    def last_token(self, node: TreeNode) -> Token: ...

    def child(self, node: TreeNode, index: int) -> TreeNode: ...

    def child_count(self, node: TreeNode) -> int: ...

    def span_start(self, node: TreeNode) -> Location: ...

    def span_end(self, node: TreeNode) -> Location: ...

    def left_sibling(self, node: TreeNode) -> Optional[TreeNode]: ...


class InMemoryTree:
    """
    `TreeAdapter` over an in-memory tree.

    Parent links are computed once at construction; the tree must not be
    modified afterwards, and a node object may appear only once in it.
    """

    def __init__(self, root: TreeNode):
        """
        Raises:
            ValueError: If a node object is reachable more than once
        """
        self.root = root
        self._parents: Dict[int, Node] = {}
        self._index_parents(root, {id(root)})

    def _index_parents(self, node: TreeNode, seen: Set[int]):
        for child in node.children:
            if id(child) in seen:
                raise ValueError(f"{child!r} appears more than once in the tree")
            seen.add(id(child))
            self._parents[id(child)] = node
            self._index_parents(child, seen)

    def first_token(self, node: TreeNode) -> Token:
        if isinstance(node, Leaf):
            return node.token
        if not node.children:
            raise ValueError(f"{node!r} has no tokens")
        return self.first_token(node.children[0])

    def last_token(self, node: TreeNode) -> Token:
        if isinstance(node, Leaf):
            return node.token
        if not node.children:
            raise ValueError(f"{node!r} has no tokens")
        return self.last_token(node.children[-1])

    def child(self, node: TreeNode, index: int) -> TreeNode:
        return node.children[index]

    def child_count(self, node: TreeNode) -> int:
        return len(node.children)

    def span_start(self, node: TreeNode) -> Location:
        return token_location(self.first_token(node))

    def span_end(self, node: TreeNode) -> Location:
        return token_location(self.last_token(node))

    def parent(self, node: TreeNode) -> Optional[Node]:
        return self._parents.get(id(node))

    def left_sibling(self, node: TreeNode) -> Optional[TreeNode]:
        parent = self.parent(node)
        if parent is None:
            return None
        index = next(i for i, c in enumerate(parent.children) if c is node)
        return parent.children[index - 1] if index > 0 else None

    def walk(self) -> Iterator[TreeNode]:
        """Yield every node depth-first, in source order."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def leaves(self) -> List[Leaf]:
        return [node for node in self.walk() if isinstance(node, Leaf)]


def load_tree(data: Dict) -> InMemoryTree:
    """
    Build an `InMemoryTree` from a JSON-compatible dictionary.

    Leaves look like ``{"text": "(", "line": 1, "column": 4, "kind": "lparen"}``
    with a 0-indexed column; inner nodes look like
    ``{"kind": "parenthesized", "children": [...]}``.

    Raises:
        TreeFormatError: If the data does not describe a valid tree
    """
    root = _load_node(data, "root")
    tree = InMemoryTree(root)
    logger.debug(f"Loaded tree with {len(tree.leaves())} tokens")
    return tree


def _load_node(data, path: str) -> TreeNode:
    if not isinstance(data, dict):
        raise TreeFormatError(f"{path}: expected an object, got {type(data).__name__}")

    if 'text' in data:
        try:
            line = data['line']
            column = data['column']
        except KeyError as e:
            raise TreeFormatError(f"{path}: token is missing {e.args[0]!r}") from e
        if not isinstance(line, int) or isinstance(line, bool) or line < 1:
            raise TreeFormatError(f"{path}: line must be a positive integer")
        if not isinstance(column, int) or isinstance(column, bool) or column < 0:
            raise TreeFormatError(f"{path}: column must be a non-negative integer")
        if not isinstance(data['text'], str) or not data['text']:
            raise TreeFormatError(f"{path}: text must be a non-empty string")
        return Leaf(Token(line, column, data['text']), data.get('kind', 'token'))

    children = data.get('children')
    if not isinstance(children, list) or not children:
        raise TreeFormatError(f"{path}: node needs 'text' or a non-empty 'children' list")

    kind = data.get('kind', 'node')
    if not isinstance(kind, str):
        raise TreeFormatError(f"{path}: kind must be a string")
    if kind in GROUP_KINDS and len(children) < 2:
        raise TreeFormatError(f"{path}: {kind} group needs its opening and closing parentheses")

    return Node(kind, [_load_node(c, f"{path}.{kind}[{i}]") for i, c in enumerate(children)])
