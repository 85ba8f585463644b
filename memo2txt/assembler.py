# assembler.py
#   Builds the final memo records, puts them in chronological order and
#   renders the text that ends up in the output file.

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from memo2txt.extractor import RawMemo
from memo2txt.normalizer import normalize_content
from memo2txt.timestamps import parse_timestamp, sort_key


# --- record ---

@dataclass(frozen=True)
class MemoRecord:
    """One finished memo, ready to be written out."""

    # the timestamp exactly as the export had it; this is what gets printed
    timestamp_text: str

    # normalized text, one or more non-empty lines
    content: str

    # None when the timestamp couldn't be parsed
    parsed_time: Optional[datetime] = None

    @property
    def sort_time(self) -> datetime:
        return sort_key(self.parsed_time)


def build_record(raw: RawMemo) -> Optional[MemoRecord]:
    # returns None for memos that end up with no content
    content = normalize_content(raw.content_html)
    if content is None:
        return None
    return MemoRecord(
        timestamp_text=raw.timestamp_text,
        content=content,
        parsed_time=parse_timestamp(raw.timestamp_text),
    )


def build_records(raws: Iterable[RawMemo]) -> List[MemoRecord]:
    records = []
    for raw in raws:
        record = build_record(raw)
        if record is not None:
            records.append(record)
    return records


# --- ordering ---

def sort_records(records: Iterable[MemoRecord], unparsed: str = "oldest") -> List[MemoRecord]:
    """
    Oldest first. The sort is stable, so memos with the same time keep the
    order they had in the export.

    `unparsed` decides where memos with an unreadable timestamp go:
    "oldest" sorts them at the fallback instant (before everything else),
    "last" puts them after all dated memos, "exclude" drops them.
    """
    records = list(records)
    if unparsed == "oldest":
        return sorted(records, key=lambda r: r.sort_time)

    dated = sorted((r for r in records if r.parsed_time is not None), key=lambda r: r.sort_time)
    undated = [r for r in records if r.parsed_time is None]
    if unparsed == "last":
        return dated + undated
    if unparsed == "exclude":
        for r in undated:
            logging.info(f"Excluding memo with unparsed time '{r.timestamp_text}'.")
        return dated
    raise ValueError(f"unknown unparsed-timestamp policy: {unparsed!r}")


# --- rendering ---

def render_records(records: Iterable[MemoRecord]) -> str:
    out = []
    for record in records:
        out.append(record.timestamp_text + "\n")
        out.append(record.content + "\n\n")
    return "".join(out)


def assemble(records: Iterable[MemoRecord], unparsed: str = "oldest") -> Tuple[str, int]:
    """Sorts and renders. Returns the output text and how many memos are in it."""
    ordered = sort_records(records, unparsed=unparsed)
    return render_records(ordered), len(ordered)
