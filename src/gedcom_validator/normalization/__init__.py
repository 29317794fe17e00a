"""
Display normalization: spouse-name backfill and id ordering.
"""

from __future__ import annotations

from .normalize import NormalizedRecords, normalize

__all__ = ["NormalizedRecords", "normalize"]
