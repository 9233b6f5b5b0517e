"""
Command-line interface for the whitespace verifier.
"""
