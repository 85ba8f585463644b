# normalizer.py
#   Turns the HTML inside a memo's content div into plain text.
#   Order matters here: line breaks have to be rewritten *before* the tags
#   are stripped, otherwise there's nothing left to tell paragraphs apart.

import re
import html
import logging
from typing import List, Optional

# </p>, <br>, <br/>, <br /> all mean "new line"
BREAK_RE = re.compile(r"</p\s*>|<br\s*/?>", re.IGNORECASE)
# any other tag, including ones sitting inside or next to each other
TAG_RE = re.compile(r"<[^>]+>")

COMMENT_MARKER = "#"


def breaks_to_newlines(content_html: str) -> str:
    return BREAK_RE.sub("\n", content_html)


def strip_tags(text: str) -> str:
    return TAG_RE.sub("", text)


def clean_lines(text: str) -> List[str]:
    """Trims every line and drops the blank ones and the '#' annotation lines."""
    lines = []
    for ln in text.split("\n"):
        t = ln.strip()
        if not t:
            continue
        # lines starting with '#' are private notes/tags, not memo text
        if t.startswith(COMMENT_MARKER):
            continue
        lines.append(t)
    return lines


def normalize_content(content_html: str) -> Optional[str]:
    """
    Converts one memo's content markup into clean text.
    Returns None when nothing is left after filtering, which means the memo
    should be dropped.
    """
    text = breaks_to_newlines(content_html)
    text = strip_tags(text)
    text = html.unescape(text)

    lines = clean_lines(text)
    if not lines:
        logging.debug("Dropping memo with no content left after filtering.")
        return None
    return "\n".join(lines)
