"""Shared constants and helpers used by both scripts and tests.

This package provides a common location for code that needs to be shared
across scripts/ and tests/ without creating circular imports.
"""

from __future__ import annotations
