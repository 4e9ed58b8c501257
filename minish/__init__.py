"""Tokenizing, syntax checking, expansion and command-tree building for a small shell."""

__version__ = "0.1.0"