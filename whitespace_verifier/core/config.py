"""
Checker configuration.

Settings come from an optional JSON file and are overridden by command-line
options.
"""

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Optional

from .printer import OUTPUT_FORMATS
from .rules import Rule, Severity

logger = logging.getLogger(__name__)

DEFAULT_LEFT_ASSOCIATED = frozenset({',', ':'})
DEFAULT_SPACE_DELIMITED = frozenset({
    '=', '+', '-', '*', '/', '==', '!=', '<', '>', '<=', '>=', '&&', '||', '->',
})


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration."""


@dataclass(frozen=True)
class CheckerConfig:
    """Settings for one verification run."""
    max_severity: Severity = Severity.ERROR
    output_format: str = 'text'
    left_associated: FrozenSet[str] = DEFAULT_LEFT_ASSOCIATED
    space_delimited: FrozenSet[str] = DEFAULT_SPACE_DELIMITED
    disabled_rules: FrozenSet[Rule] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(f"output_format must be one of {', '.join(OUTPUT_FORMATS)}")
        overlap = self.left_associated & self.space_delimited
        if overlap:
            raise ConfigError(f"Punctuation configured twice: {', '.join(sorted(overlap))}")

    def is_enabled(self, rule: Rule) -> bool:
        return rule not in self.disabled_rules

    @classmethod
    def from_dict(cls, data: Dict) -> "CheckerConfig":
        """
        Build a config from a JSON-compatible dictionary.

        Raises:
            ConfigError: On unknown keys or invalid values
        """
        known = {'max_severity', 'output_format', 'left_associated', 'space_delimited', 'disabled_rules'}
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        kwargs = {}
        if 'max_severity' in data:
            kwargs['max_severity'] = parse_severity(data['max_severity'])
        if 'output_format' in data:
            kwargs['output_format'] = data['output_format']
        if 'left_associated' in data:
            kwargs['left_associated'] = _string_set(data['left_associated'], 'left_associated')
        if 'space_delimited' in data:
            kwargs['space_delimited'] = _string_set(data['space_delimited'], 'space_delimited')
        if 'disabled_rules' in data:
            kwargs['disabled_rules'] = parse_rules(_string_set(data['disabled_rules'], 'disabled_rules'))

        return cls(**kwargs)

    @classmethod
    def from_file(cls, path: str) -> "CheckerConfig":
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to read config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config {path} must contain a JSON object")

        logger.info(f"Loaded configuration from {Path(path).name}")
        return cls.from_dict(data)

    def override(self, max_severity: Optional[str] = None, output_format: Optional[str] = None,
                 disabled_rules: Iterable[str] = ()) -> "CheckerConfig":
        """Return a copy with command-line values applied on top."""
        changes = {}
        if max_severity is not None:
            changes['max_severity'] = parse_severity(max_severity)
        if output_format is not None:
            changes['output_format'] = output_format
        extra = parse_rules(disabled_rules)
        if extra:
            changes['disabled_rules'] = self.disabled_rules | extra
        return replace(self, **changes) if changes else self


def parse_severity(value) -> Severity:
    try:
        return Severity(value)
    except ValueError as e:
        choices = ', '.join(s.value for s in Severity)
        raise ConfigError(f"Invalid severity {value!r}, expected one of {choices}") from e


def parse_rules(values: Iterable[str]) -> FrozenSet[Rule]:
    rules = set()
    for value in values:
        try:
            rules.add(Rule(value))
        except ValueError as e:
            raise ConfigError(f"Unknown rule {value!r}") from e
    return frozenset(rules)


def _string_set(value, key: str) -> FrozenSet[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
        raise ConfigError(f"{key} must be a list of non-empty strings")
    return frozenset(value)
