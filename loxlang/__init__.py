"""Lox language package.

A scanner, recursive descent parser and tree-walk interpreter for a small
subset of Lox: expressions, ``print`` and ``var``.


File: __init__.py
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
