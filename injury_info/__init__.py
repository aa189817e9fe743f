"""Injury info middleware: source ranking, active-case detection, content aggregation."""

__version__ = "0.1.0"
