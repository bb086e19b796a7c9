from __future__ import annotations

from typing import TypedDict


class DedupStats(TypedDict):
    records_in: int
    records_out: int
    # records with no N entry
    dropped: int
    # records folded into an earlier one with the same N entry
    merged: int


__all__ = [
    "DedupStats",
]
