# timestamps.py
import re
import logging
from datetime import datetime
from typing import Optional

# e.g. "2023-01-02 10:00:00"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
# strptime happily takes "2023-1-2 9:0:0", so the zero-padded shape is checked first
TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")

# Stand-in for memos whose time can't be read, so they still sort somewhere.
# It's the earliest datetime Python has, so those memos come first.
FALLBACK_INSTANT = datetime.min


def parse_timestamp(text: str) -> Optional[datetime]:
    """Parses a memo timestamp. Logs a warning and returns None if it can't."""
    text = text.strip()
    try:
        if not TIMESTAMP_RE.match(text):
            raise ValueError(f"time data '{text}' does not match format 'YYYY-MM-DD HH:MM:SS'")
        return datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as e:
        logging.warning(f"Warning: could not parse time '{text}': {e}")
        return None


def sort_key(parsed: Optional[datetime]) -> datetime:
    return parsed if parsed is not None else FALLBACK_INSTANT
