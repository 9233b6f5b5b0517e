"""
Rule identifiers, severities and violation messages.
"""

from enum import Enum


class Severity(Enum):
    """Violation severity levels, lowest first."""
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]

    def cap(self, maximum: "Severity") -> "Severity":
        """Return this severity, lowered to `maximum` if it exceeds it."""
        return self if self.rank <= maximum.rank else maximum


_SEVERITY_RANK = {
    Severity.WARNING: 1,
    Severity.ERROR: 2,
}


class Rule(Enum):
    """Whitespace rules this tool can report."""
    COMMA_WHITESPACE = "comma-whitespace"
    COLON_WHITESPACE = "colon-whitespace"
    PUNCTUATION_WHITESPACE = "punctuation-whitespace"
    OPERATOR_WHITESPACE = "operator-whitespace"
    PARENTHESIS_WHITESPACE = "parenthesis-whitespace"

    @property
    def description(self) -> str:
        return RULE_DESCRIPTIONS[self]


RULE_DESCRIPTIONS = {
    Rule.COMMA_WHITESPACE: 'No whitespace before a comma and exactly one space after it',
    Rule.COLON_WHITESPACE: 'No whitespace before a colon and exactly one space after it',
    Rule.PUNCTUATION_WHITESPACE: 'No whitespace before other left-associated punctuation and exactly one space after it',
    Rule.OPERATOR_WHITESPACE: 'Exactly one space on both sides of a binary operator',
    Rule.PARENTHESIS_WHITESPACE: 'No whitespace inside parentheses or before an opening parenthesis',
}

# Violation messages
AT_COLUMN = " at column "
NO_SPACE_BEFORE = "should have no spaces on its left"
SPACE_BEFORE = "should have one space on its left"
SPACE_AFTER = "should have one space on its right"
EMPTY_PARENTHESES = "Empty parentheses "
ILLEGAL_WHITESPACE = "should not contain whitespace"
PARENTHESES_CONTENT = "Parentheses content "
LEADING_WHITESPACE = "should not have leading whitespace"
NOT_END_SPACE = "should not end with whitespace"
NO_WHITESPACE_BEFORE_PARENTHESES = "There should be no whitespace before the opening parenthesis"
