"""Fuzz testing infrastructure for utf8engine.

This package contains:
- test_iterator_oracle: State machine walking Utf8Iterator against a str oracle
- test_sanitize_property: Intensive sanitizer and validator properties

Python 3.13+.
"""
