# extractor.py
"""
Finds memo records in the exported HTML.

The export always lays a memo out the same way:

    <div class="memo">
      <div class="time">2023-01-01 09:00:00</div>
      <div class="content"><p>...</p></div>
    </div>

so instead of building a full document tree we scan the text with one regex.
This only works because the record shape is fixed; if the export format
changes, MEMO_PATTERN is the one place that has to follow it.
"""

import re
import logging
from typing import Iterator, List, NamedTuple

from memo2txt.errors import NoMemosFound

# DOTALL so a memo's content may span as many lines as it likes.
MEMO_PATTERN = re.compile(
    r'<div class="memo">.*?'
    r'<div class="time">(.*?)</div>.*?'
    r'<div class="content">(.*?)</div>.*?'
    r'</div>',
    re.DOTALL,
)


class RawMemo(NamedTuple):
    timestamp_text: str
    content_html: str


def iter_raw_memos(html: str) -> Iterator[RawMemo]:
    """Yields one RawMemo per match, in document order."""
    for match in MEMO_PATTERN.finditer(html):
        time_str, content_html = match.group(1), match.group(2)
        if time_str is None or content_html is None:
            # partial match, nothing usable in it
            logging.debug(f"Skipping partial memo match at offset {match.start()}")
            continue
        yield RawMemo(time_str.strip(), content_html)


def extract_memos(html: str) -> List[RawMemo]:
    """
    Returns every memo in the document.
    Raises NoMemosFound when the pattern matches nothing at all.
    """
    memos = list(iter_raw_memos(html))
    if not memos:
        raise NoMemosFound()
    logging.debug(f"Extracted {len(memos)} raw memos.")
    return memos
