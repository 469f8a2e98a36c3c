"""Shared pytest fixtures and configuration for the ax-tuple test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Optional UI packages are hidden through ``sys.modules``, never uninstalled.
* Tests must not depend on OS state.
"""

from __future__ import annotations
