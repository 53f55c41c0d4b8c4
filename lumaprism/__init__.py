"""Analyze and clean PrismLauncher disk usage: scanners, reports and a trash-based cleaner."""

__version__ = "0.0.1"