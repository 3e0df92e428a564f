"""Record helpers shared by the JSON repositories."""

from __future__ import annotations


def next_id(records: list[dict], sequences: dict[str, int], section: str) -> int:
    """Issue the next ID for ``section``.

    The last issued ID is kept in ``sequences`` so an ID is never handed
    out twice, even after the record holding it was deleted.
    """
    last = max(
        sequences.get(section, 0),
        max((r["id"] for r in records), default=0),
    )
    sequences[section] = last + 1
    return last + 1


def upsert(records: list[dict], raw: dict) -> None:
    """Replace the record with the same ID, or append it."""
    for i, existing in enumerate(records):
        if existing["id"] == raw["id"]:
            records[i] = raw
            return
    records.append(raw)
