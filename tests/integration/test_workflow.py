"""
Integration tests for the complete verification workflow.

These tests verify that tree loading, the walker, the verifiers, the printer
and the CLI work together on realistic token trees.
"""

import json

import pytest
from click.testing import CliRunner

from whitespace_verifier.cli.commands import main
from whitespace_verifier.core.config import CheckerConfig
from whitespace_verifier.core.printer import Printer
from whitespace_verifier.core.rules import Rule, Severity
from whitespace_verifier.core.tree import load_tree
from whitespace_verifier.core.walker import TreeWalker


def tok(text, column, line=1, kind='token'):
    return {'text': text, 'line': line, 'column': column, 'kind': kind}


# foo (a ,b)
BAD_CALL = {
    'kind': 'call',
    'children': [
        tok('foo', 0, kind='identifier'),
        {'kind': 'call_arguments', 'children': [
            tok('(', 4),
            {'kind': 'arguments', 'children': [tok('a', 5), tok(',', 7), tok('b', 8)]},
            tok(')', 9),
        ]},
    ],
}

# x = foo(a, b) + (c)
CLEAN_STATEMENT = {
    'kind': 'assignment',
    'children': [
        tok('x', 0),
        tok('=', 2),
        {'kind': 'binary', 'children': [
            {'kind': 'call', 'children': [
                tok('foo', 4),
                {'kind': 'call_arguments', 'children': [
                    tok('(', 7),
                    {'kind': 'arguments', 'children': [tok('a', 8), tok(',', 9), tok('b', 11)]},
                    tok(')', 12),
                ]},
            ]},
            tok('+', 14),
            {'kind': 'parenthesized', 'children': [tok('(', 16), tok('c', 17), tok(')', 18)]},
        ]},
    ],
}

# if ( ) {
#     y  = z
# }
MIXED = {
    'kind': 'if',
    'children': [
        tok('if', 0, kind='keyword'),
        {'kind': 'parenthesized', 'children': [tok('(', 3), tok(')', 5)]},
        tok('{', 7),
        {'kind': 'assignment', 'children': [tok('y', 4, line=2), tok('=', 7, line=2), tok('z', 9, line=2)]},
        tok('}', 0, line=3),
    ],
}


class TestWalkerWorkflow:
    """Test loading a tree and walking it."""

    def run(self, data, config=None):
        printer = Printer("tree.json", (config or CheckerConfig()).max_severity)
        TreeWalker(load_tree(data), printer, config).run()
        return printer

    def test_bad_call(self):
        printer = self.run(BAD_CALL)

        assert [v.format() for v in printer.violations] == [
            "tree.json:1:3: error: [parenthesis-whitespace] "
            "There should be no whitespace before the opening parenthesis",
            "tree.json:1:8: error: [comma-whitespace] Comma at column 8 should have no spaces on its left",
            "tree.json:1:8: error: [comma-whitespace] Comma at column 8 should have one space on its right",
        ]

    def test_clean_statement(self):
        printer = self.run(CLEAN_STATEMENT)

        assert printer.violations == []

    def test_mixed_constructs(self):
        printer = self.run(MIXED)

        assert [(v.rule, v.location.line, v.location.column) for v in printer.violations] == [
            (Rule.PARENTHESIS_WHITESPACE, 1, 4),
            (Rule.OPERATOR_WHITESPACE, 2, 8),
        ]

    def test_plain_parentheses_may_follow_a_space(self):
        """`if ( )` is only checked inside, not before the parenthesis."""
        printer = self.run(MIXED)

        messages = [v.message for v in printer.violations]
        assert "There should be no whitespace before the opening parenthesis" not in messages

    def test_disabled_rule(self):
        config = CheckerConfig.from_dict({'disabled_rules': ['comma-whitespace']})

        printer = self.run(BAD_CALL, config)

        assert [v.rule for v in printer.violations] == [Rule.PARENTHESIS_WHITESPACE]

    def test_max_severity_warning(self):
        config = CheckerConfig(max_severity=Severity.WARNING)

        printer = self.run(BAD_CALL, config)

        assert len(printer.violations) == 3
        assert all(v.severity == Severity.WARNING for v in printer.violations)

    def test_custom_punctuation(self):
        """Punctuation sets come from the configuration."""
        config = CheckerConfig.from_dict({'left_associated': [','], 'space_delimited': [':']})
        data = {'kind': 'pair', 'children': [tok('k', 0), tok(':', 1), tok('v', 3)]}

        printer = self.run(data, config)

        assert [v.message for v in printer.violations] == [
            "Operator ':' at column 2 should have one space on its left",
        ]


class TestCli:
    """Test the command-line interface."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def write_tree(self, tmp_path, name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return str(path)

    def test_check_clean_file(self, tmp_path):
        path = self.write_tree(tmp_path, "clean.json", CLEAN_STATEMENT)

        result = self.runner.invoke(main, ['check', path])

        assert result.exit_code == 0
        assert "Errors: 0" in result.output

    def test_check_reports_violations(self, tmp_path):
        path = self.write_tree(tmp_path, "bad.json", BAD_CALL)

        result = self.runner.invoke(main, ['check', '--format', 'xcode', path])

        assert result.exit_code == 1
        assert ("bad.json:1:8: error: [comma-whitespace] Comma at column 8 should have no spaces on its left"
                in result.output)

    def test_check_json_output(self, tmp_path):
        path = self.write_tree(tmp_path, "bad.json", BAD_CALL)

        result = self.runner.invoke(main, ['check', '--format', 'json', path])

        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert [v['rule'] for v in data] == ['parenthesis-whitespace', 'comma-whitespace', 'comma-whitespace']

    def test_max_severity_warning_passes(self, tmp_path):
        path = self.write_tree(tmp_path, "bad.json", BAD_CALL)

        result = self.runner.invoke(main, ['check', '--max-severity', 'warning', '--format', 'xcode', path])

        assert result.exit_code == 0
        assert "warning: [comma-whitespace]" in result.output

    def test_disable_rules(self, tmp_path):
        path = self.write_tree(tmp_path, "bad.json", BAD_CALL)

        result = self.runner.invoke(main, ['check', '--disable', 'comma-whitespace',
                                           '--disable', 'parenthesis-whitespace', path])

        assert result.exit_code == 0

    def test_config_file(self, tmp_path):
        path = self.write_tree(tmp_path, "bad.json", BAD_CALL)
        config = tmp_path / "config.json"
        config.write_text(json.dumps({'output_format': 'xcode', 'disabled_rules': ['comma-whitespace']}))

        result = self.runner.invoke(main, ['check', '--config', str(config), path])

        assert result.exit_code == 1
        assert "[parenthesis-whitespace]" in result.output
        assert "[comma-whitespace]" not in result.output

    def test_invalid_config(self, tmp_path):
        path = self.write_tree(tmp_path, "bad.json", BAD_CALL)
        config = tmp_path / "config.json"
        config.write_text(json.dumps({'max_severity': 'fatal'}))

        result = self.runner.invoke(main, ['check', '--config', str(config), path])

        assert result.exit_code == 2

    @pytest.mark.parametrize("content", ["{not json", json.dumps({'kind': 'call'})])
    def test_unreadable_tree(self, tmp_path, content):
        path = tmp_path / "broken.json"
        path.write_text(content)

        result = self.runner.invoke(main, ['check', str(path)])

        assert result.exit_code == 2

    def test_group_missing_parenthesis(self, tmp_path):
        """A group with only its opening parenthesis is bad input, not a violation."""
        path = self.write_tree(tmp_path, "short.json",
                               {'kind': 'parenthesized', 'children': [tok('(', 0)]})

        result = self.runner.invoke(main, ['check', path])

        assert result.exit_code == 2
        assert not isinstance(result.exception, ValueError)

    def test_tree_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"text": "\xff", "line": 1, "column": 0}')

        result = self.runner.invoke(main, ['check', str(path)])

        assert result.exit_code == 2
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_config_not_utf8(self, tmp_path):
        path = self.write_tree(tmp_path, "clean.json", CLEAN_STATEMENT)
        config = tmp_path / "config.json"
        config.write_bytes(b'{"output_format": "\xff"}')

        result = self.runner.invoke(main, ['check', '--config', str(config), path])

        assert result.exit_code == 2
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_rules_command(self):
        result = self.runner.invoke(main, ['rules'])

        assert result.exit_code == 0
        assert "operator-whitespace" in result.output
