"""Recover existing translations from script dumps into translation spreadsheets."""

__version__ = "0.1.0"
