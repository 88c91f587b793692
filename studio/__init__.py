"""AENEAS Studio showcase: static catalogs, board renderer and the showcase state machine."""

__version__ = "0.1.0"
