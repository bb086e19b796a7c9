from __future__ import annotations

from collections.abc import Iterable

from .dedup import dedupe_with_stats
from .models import Record
from .parser import parse_records
from .types import DedupStats
from .utils import LF


def record_to_vcf(record: Record, newline: str = LF) -> str:
    """Serialize one record as a BEGIN/VERSION/.../END block.

    Entry lines are written exactly as parsed; nothing is re-folded.
    """
    return "".join(line + newline for line in record.lines())


def records_to_vcf(records: Iterable[Record], newline: str = LF) -> str:
    return "".join(record_to_vcf(r, newline) for r in records)


def dedupe_vcf_with_stats(text: str, newline: str = LF) -> tuple[str, DedupStats]:
    collection, stats = dedupe_with_stats(parse_records(text))
    return records_to_vcf(collection.values(), newline), stats


def dedupe_vcf(text: str, newline: str = LF) -> str:
    """Parse ``text``, merge cards sharing an N entry and serialize the result."""
    out, _stats = dedupe_vcf_with_stats(text, newline)
    return out


__all__ = [
    "record_to_vcf",
    "records_to_vcf",
    "dedupe_vcf_with_stats",
    "dedupe_vcf",
]
