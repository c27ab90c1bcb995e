"""Parser package for Lox.

This package splits the parser functionality into multiple modules to
keep the code organized. The :class:`Parser` class is exposed at the
package level for convenience.


File: __init__.py
Version: 0.1.0
License: MIT
"""

from .parser import Parser

__all__ = ["Parser"]
