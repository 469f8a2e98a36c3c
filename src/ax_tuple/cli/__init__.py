"""CLI layer — argument parsing, demo rendering, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core`` and ``demo``, but no other layer may import from ``cli``.
"""
