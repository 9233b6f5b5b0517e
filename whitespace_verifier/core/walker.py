"""
Tree Walker Module

Drives the whitespace verifiers over a whole tree: every parenthesized group
and every configured punctuation token is handed to the matching check.
"""

import logging
from typing import Dict, Optional

from .config import CheckerConfig
from .printer import ViolationSink
from .rules import Rule
from .tree import GROUP_KINDS, InMemoryTree, Leaf, Node
from .verifier import WhitespaceVerifier

logger = logging.getLogger(__name__)

# Groups that must also hug the node on their left, e.g. `foo(x)`
ATTACHED_GROUP_KINDS = {'call_arguments'}

PUNCTUATION_NAMES = {
    ',': 'Comma',
    ':': 'Colon',
    ';': 'Semicolon',
}


class TreeWalker:
    """
    Walks an `InMemoryTree` in source order and runs the whitespace checks.

    Punctuation neighbours are taken from the flat token stream, so a comma
    is compared with whatever token precedes and follows it regardless of
    where the tokens sit in the tree.
    """

    def __init__(self, tree: InMemoryTree, printer: ViolationSink, config: Optional[CheckerConfig] = None):
        self.tree = tree
        self.printer = printer
        self.config = config or CheckerConfig()
        self._verifiers: Dict[Rule, WhitespaceVerifier] = {}

    def _verifier(self, rule: Rule) -> WhitespaceVerifier:
        if rule not in self._verifiers:
            self._verifiers[rule] = WhitespaceVerifier(self.printer, rule, self.tree)
        return self._verifiers[rule]

    def run(self):
        """Check the whole tree, reporting every violation to the printer."""
        leaves = self.tree.leaves()
        positions = {id(leaf): i for i, leaf in enumerate(leaves)}
        checked = 0

        for node in self.tree.walk():
            if isinstance(node, Node):
                if node.kind in GROUP_KINDS:
                    self._check_group(node)
                    checked += 1
                continue

            index = positions[id(node)]
            if index == 0 or index == len(leaves) - 1:
                continue
            if self._check_punctuation(leaves[index - 1], node, leaves[index + 1]):
                checked += 1

        logger.debug(f"Checked {checked} constructs across {len(leaves)} tokens")

    def _check_group(self, group: Node):
        if not self.config.is_enabled(Rule.PARENTHESIS_WHITESPACE):
            return

        verifier = self._verifier(Rule.PARENTHESIS_WHITESPACE)
        verifier.verify_parenthesis_content_whitespace(group)

        if group.kind in ATTACHED_GROUP_KINDS and self.tree.left_sibling(group) is not None:
            verifier.verify_parenthesis_surrounding_whitespace(group)

    def _check_punctuation(self, left: Leaf, punctuation: Leaf, right: Leaf) -> bool:
        text = punctuation.token.text

        if text in self.config.left_associated:
            rule = _left_associated_rule(text)
            if self.config.is_enabled(rule):
                self._verifier(rule).verify_punctuation_left_association(
                    left.token, right.token, punctuation.token, PUNCTUATION_NAMES.get(text, f"'{text}'"))
            return True

        if text in self.config.space_delimited:
            if self.config.is_enabled(Rule.OPERATOR_WHITESPACE):
                self._verifier(Rule.OPERATOR_WHITESPACE).verify_punctuation_is_space_delimited(
                    left.token, right.token, punctuation.token, f"Operator '{text}'")
            return True

        return False


def _left_associated_rule(text: str) -> Rule:
    if text == ',':
        return Rule.COMMA_WHITESPACE
    if text == ':':
        return Rule.COLON_WHITESPACE
    return Rule.PUNCTUATION_WHITESPACE
