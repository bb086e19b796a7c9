from __future__ import annotations

import logging
from collections.abc import Iterable

from .models import Entry, Record
from .types import DedupStats
from .utils import NAME_PROPERTY

logger = logging.getLogger(__name__)


def merge_key(record: Record) -> Entry | None:
    """Return the N entry identifying ``record``, or None.

    An exact ``N`` property wins; otherwise any entry whose line starts with
    ``N`` is used.
    """
    return record.find(NAME_PROPERTY) or record.get(NAME_PROPERTY)


def dedupe_with_stats(records: Iterable[Record]) -> tuple[dict[Entry, Record], DedupStats]:
    collection: dict[Entry, Record] = {}
    stats: DedupStats = {"records_in": 0, "records_out": 0, "dropped": 0, "merged": 0}
    for record in records:
        stats["records_in"] += 1
        key = merge_key(record)
        if key is None:
            stats["dropped"] += 1
            continue
        existing = collection.get(key)
        if existing is None:
            collection[key] = record.copy()
        else:
            existing.merge(record)
            stats["merged"] += 1
    stats["records_out"] = len(collection)
    logger.debug(
        "Deduplicated %d card(s) into %d (%d merged, %d without N dropped)",
        stats["records_in"],
        stats["records_out"],
        stats["merged"],
        stats["dropped"],
    )
    return collection, stats


def deduplicate(records: Iterable[Record]) -> dict[Entry, Record]:
    """Group records by their N entry and union the entries of each group.

    Records without an N entry are left out. Each group keeps the VERSION line
    of its first record. The records passed in are not modified.
    """
    collection, _stats = dedupe_with_stats(records)
    return collection


__all__ = ["merge_key", "dedupe_with_stats", "deduplicate"]
