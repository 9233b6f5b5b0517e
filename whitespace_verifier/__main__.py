"""
Main entry point for the whitespace-verifier package.

This allows the package to be run as a module:
python -m whitespace_verifier
"""

from .cli.commands import main

if __name__ == '__main__':
    main()
