"""Utility functions for blobgzip.

This module provides stream inspection helpers.
"""

from __future__ import annotations

from .members import MemberStats, StreamSummary, scan_members, summarize_stream

__all__ = [
    "MemberStats",
    "StreamSummary",
    "scan_members",
    "summarize_stream",
]
