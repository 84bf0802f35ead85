"""Audit module for verification runs.

Provides structured logging of each verification's intermediate values
for tracing disputed draws.
"""

from __future__ import annotations

__all__: list[str] = []
