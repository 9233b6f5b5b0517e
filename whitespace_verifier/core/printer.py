"""
Violation Printer Module

This module provides the reporting sink the verifiers write to. Violations
are recorded in detection order, never merged or deduplicated, and can be
rendered for humans (rich table), for Xcode-style tooling, or as JSON.
"""

import json
import logging
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

from rich.console import Console
from rich.table import Table

from .position import Location
from .rules import Rule, Severity

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ('text', 'xcode', 'json')


class ViolationSink(Protocol):
    """Anything that accepts violation reports."""

    def report(self, rule: Rule, message: str, location: Location) -> None: ...


@dataclass(frozen=True)
class Violation:
    """A single spacing mismatch."""
    rule: Rule
    severity: Severity
    message: str
    location: Location
    filepath: str = ""

    def format(self) -> str:
        """Xcode-compatible one-line representation."""
        prefix = f"{self.filepath}:" if self.filepath else ""
        return (f"{prefix}{self.location.line}:{self.location.column}: "
                f"{self.severity.value}: [{self.rule.value}] {self.message}")

    def to_dict(self) -> Dict:
        return {
            'file': self.filepath,
            'line': self.location.line,
            'column': self.location.column,
            'severity': self.severity.value,
            'rule': self.rule.value,
            'message': self.message,
        }


class Printer:
    """
    Collecting violation sink.

    Safe to share between threads walking independent subtrees; the
    relative order of their violations is unspecified.
    """

    def __init__(self, filepath: str = "", max_severity: Severity = Severity.ERROR):
        """
        Initialize the printer.

        Args:
            filepath: Source the violations belong to, used when rendering
            max_severity: Highest severity a violation may be recorded with
        """
        self.filepath = filepath
        self.max_severity = max_severity
        self._violations: List[Violation] = []
        self._lock = threading.Lock()

    def report(self, rule: Rule, message: str, location: Location) -> None:
        self.error(rule, message, location)

    def error(self, rule: Rule, message: str, location: Location) -> None:
        self._record(rule, Severity.ERROR, message, location)

    def warn(self, rule: Rule, message: str, location: Location) -> None:
        self._record(rule, Severity.WARNING, message, location)

    def _record(self, rule: Rule, severity: Severity, message: str, location: Location):
        violation = Violation(rule, severity.cap(self.max_severity), message, location, self.filepath)
        with self._lock:
            self._violations.append(violation)
        logger.debug(f"Recorded {violation.format()}")

    @property
    def violations(self) -> List[Violation]:
        with self._lock:
            return list(self._violations)

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == Severity.WARNING)

    def has_errors(self) -> bool:
        return self.error_count > 0

    def render(self, output_format: str = 'text', console: Optional[Console] = None) -> None:
        """
        Print the collected violations.

        Args:
            output_format: One of 'text', 'xcode' or 'json'
            console: Rich console to print to (defaults to stdout)
        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {output_format}")

        console = console or Console()
        violations = self.violations

        if output_format == 'xcode':
            for violation in violations:
                console.print(violation.format(), markup=False, highlight=False, soft_wrap=True)
            return

        if output_format == 'json':
            console.print(json.dumps([v.to_dict() for v in violations], indent=2),
                          markup=False, highlight=False, soft_wrap=True)
            return

        if not violations:
            console.print(f"[green]{self.filepath or 'input'}: no whitespace violations[/green]")
            return

        table = Table(title=self.filepath or None)
        table.add_column("Location", style="cyan", no_wrap=True)
        table.add_column("Severity")
        table.add_column("Rule", style="magenta", no_wrap=True)
        table.add_column("Message")

        for violation in violations:
            color = "red" if violation.severity == Severity.ERROR else "yellow"
            table.add_row(
                str(violation.location),
                f"[{color}]{violation.severity.value}[/{color}]",
                violation.rule.value,
                violation.message,
            )

        console.print(table)
