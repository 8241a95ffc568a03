"""Batch HTTP timing with httpstat."""

__version__ = "0.1.0"
