"""
Core module for the transliteration test runner.

Holds the case data pipeline (parse, classify, interact, judge, record)
separated from the pytest and CLI entry points.
"""

__version__ = "0.1.0"
