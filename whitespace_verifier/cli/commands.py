"""
Command-line interface for the whitespace verifier.

This module provides CLI commands for checking JSON tree dumps for
whitespace violations and listing the available rules.
"""

import json
import sys
import click
import logging
from pathlib import Path
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..core.config import CheckerConfig, ConfigError
from ..core.printer import OUTPUT_FORMATS, Printer
from ..core.rules import Rule, Severity
from ..core.tree import TreeFormatError, load_tree
from ..core.walker import TreeWalker

console = Console()
error_console = Console(stderr=True)

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_BAD_INPUT = 2


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(verbose):
    """whitespace-verifier - Check spacing around punctuation, operators and parentheses."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        error_console.print("[dim]Verbose mode enabled[/dim]")


@main.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='JSON configuration file')
@click.option('--max-severity', type=click.Choice([s.value for s in Severity]),
              help='Highest severity violations are reported with')
@click.option('--format', 'output_format', type=click.Choice(OUTPUT_FORMATS),
              help='Output format')
@click.option('--disable', 'disabled', multiple=True, type=click.Choice([r.value for r in Rule]),
              help='Disable a rule (repeatable)')
def check(paths, config_path, max_severity, output_format, disabled):
    """Check JSON token-tree dumps for whitespace violations."""
    try:
        config = CheckerConfig.from_file(config_path) if config_path else CheckerConfig()
        config = config.override(max_severity=max_severity, output_format=output_format,
                                 disabled_rules=disabled)
    except ConfigError as e:
        error_console.print(f"[red]Invalid configuration: {e}[/red]")
        logger.error(f"Invalid configuration: {e}")
        sys.exit(EXIT_BAD_INPUT)

    errors = 0
    warnings = 0

    for path in paths:
        try:
            printer = check_file(path, config)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, TreeFormatError) as e:
            error_console.print(f"[red]Failed to check {path}: {e}[/red]")
            logger.error(f"Failed to check {path}: {e}")
            sys.exit(EXIT_BAD_INPUT)

        printer.render(config.output_format, console)
        errors += printer.error_count
        warnings += printer.warning_count

    if config.output_format == 'text':
        summary = f"Files: {len(paths)}\nErrors: {errors}\nWarnings: {warnings}"
        console.print(Panel(summary, title="Whitespace Summary", border_style="red" if errors else "green"))

    sys.exit(EXIT_VIOLATIONS if errors else EXIT_OK)


@main.command()
def rules():
    """List the whitespace rules."""
    table = Table(title="Whitespace Rules")
    table.add_column("Rule", style="magenta", no_wrap=True)
    table.add_column("Description")

    for rule in Rule:
        table.add_row(rule.value, rule.description)

    console.print(table)


def check_file(path: str, config: CheckerConfig) -> Printer:
    """Load one tree dump and run every enabled check over it."""
    logger.debug(f"Checking {path}")
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    tree = load_tree(data)
    printer = Printer(Path(path).name, config.max_severity)
    TreeWalker(tree, printer, config).run()

    logger.info(f"{path}: {len(printer.violations)} violations")
    return printer
