"""
Whitespace Verifier Module

This module provides the checks used by the whitespace rules to verify the
spacing around punctuation, operators and parenthesized groups.
"""

import logging

from . import rules
from .gaps import check_left_spaces, check_right_spaces, different_lines
from .position import Location, Token, end_location, token_location
from .printer import ViolationSink
from .rules import Rule
from .tree import TreeAdapter, TreeNode

logger = logging.getLogger(__name__)


class WhitespaceVerifier:
    """
    Spacing checks bound to one reporting sink and one rule.

    The verifier holds no state of its own; create one instance per rule and
    per traversal thread unless the sink is synchronized.
    """

    def __init__(self, printer: ViolationSink, rule: Rule, tree: TreeAdapter):
        """
        Initialize the verifier.

        Args:
            printer: Sink that receives violation reports
            rule: Rule every report is filed under
            tree: Navigation adapter for the tree being checked
        """
        self.printer = printer
        self.rule = rule
        self.tree = tree

    def _report(self, message: str, location: Location):
        logger.debug(f"{self.rule.value} at {location}: {message}")
        self.printer.report(self.rule, message, location)

    def verify_punctuation_left_association(self, left: Token, right: Token, punctuation: Token, label: str):
        """
        Verify that a punctuation token is left associated: no space on its
        left and exactly one space on its right.

        Args:
            left: Token on the left of the punctuation token
            right: Token on the right of the punctuation token
            punctuation: Punctuation token
            label: Name of the punctuation used in violation messages
        """
        location = token_location(punctuation)

        if different_lines(left, punctuation) or check_left_spaces(left, punctuation, 0):
            self._report(f"{label}{rules.AT_COLUMN}{location.column} {rules.NO_SPACE_BEFORE}", location)

        if check_right_spaces(right, punctuation, 1):
            self._report(f"{label}{rules.AT_COLUMN}{location.column} {rules.SPACE_AFTER}", location)

    def verify_punctuation_is_space_delimited(self, left: Token, right: Token, punctuation: Token, label: str):
        """
        Verify that a punctuation token has exactly one space on either side.

        Neighbours on another line are not flagged.
        """
        location = token_location(punctuation)

        if check_left_spaces(left, punctuation, 1):
            self._report(f"{label}{rules.AT_COLUMN}{location.column} {rules.SPACE_BEFORE}", location)

        if check_right_spaces(right, punctuation, 1):
            self._report(f"{label}{rules.AT_COLUMN}{location.column} {rules.SPACE_AFTER}", location)

    def verify_parenthesis_content_whitespace(self, group: TreeNode):
        """
        Verify that a parenthesized group has no whitespace right after the
        opening parenthesis or right before the closing one.

        Args:
            group: Node whose children are (open, content, close) or (open, close)

        Raises:
            ValueError: If the group has fewer than two children
        """
        child_count = self.tree.child_count(group)
        if child_count < 2:
            raise ValueError(f"Parenthesized group needs at least 2 children, got {child_count}")

        opening_location = self.tree.span_start(group)

        # Only whitespace between the parentheses, e.g. `if ( ) {}`
        if child_count == 2:
            closing_location = self.tree.span_end(group)
            if (opening_location.line == closing_location.line
                    and closing_location.column != opening_location.column + 1):
                self._report(rules.EMPTY_PARENTHESES + rules.ILLEGAL_WHITESPACE, opening_location)
            return

        opening = self.tree.last_token(self.tree.child(group, 0))
        content = self.tree.child(group, 1)
        content_start = self.tree.first_token(content)
        content_end = self.tree.last_token(content)
        closing = self.tree.last_token(self.tree.child(group, 2))

        if check_left_spaces(opening, content_start, 0):
            self._report(rules.PARENTHESES_CONTENT + rules.LEADING_WHITESPACE, opening_location)

        # Gap measured from the end of the content up to the closing parenthesis
        if check_right_spaces(closing, content_end, 0):
            self._report(rules.PARENTHESES_CONTENT + rules.NOT_END_SPACE, end_location(content_end))

    def verify_parenthesis_surrounding_whitespace(self, group: TreeNode):
        """
        Verify that there is no whitespace before the opening parenthesis of
        a group.

        Raises:
            ValueError: If the group has no left sibling
        """
        left_node = self.tree.left_sibling(group)
        if left_node is None:
            raise ValueError(f"{group!r} has no left sibling")

        left = self.tree.last_token(left_node)
        opening = self.tree.first_token(self.tree.child(group, 0))

        if check_left_spaces(left, opening, 0):
            self._report(rules.NO_WHITESPACE_BEFORE_PARENTHESES, end_location(left))
