"""
sexpc Command-Line Interface
============================

This package provides the ``sexpc`` command-line tool, a Click-based
wrapper around the compiler with help text, debug dumps and
consistent exit codes.
"""

__all__ = ["sexpc"]
