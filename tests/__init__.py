"""
Test package for the whitespace verifier.

This package contains:
- Unit tests for positions, gap checkers, verifiers, tree navigation,
  the printer and configuration
- Integration tests for the tree walker and the CLI
- Property-based tests using Hypothesis
"""
