"""Typed adapter around the hledger accounting CLI."""

__version__ = "0.1.0"
