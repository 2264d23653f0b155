"""
Text emitters for the plugin output.

- imports:    the `prepend` block (module imports)
- fragments:  fragment document constants
- operations: operation document constants and composition functions
"""

from .imports import build_imports
from .fragments import render_fragments
from .operations import render_operation, render_operations

__all__ = [
    "build_imports",
    "render_fragments",
    "render_operation",
    "render_operations",
]
