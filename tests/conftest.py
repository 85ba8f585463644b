import sys
from pathlib import Path

import pytest


def _ensure_root_on_path() -> None:
    root = Path(__file__).resolve().parents[1]
    root_str = str(root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_ensure_root_on_path()


def memo_block(time_str: str, content_html: str) -> str:
    return (
        '<div class="memo">\n'
        f'  <div class="time">{time_str}</div>\n'
        f'  <div class="content">{content_html}</div>\n'
        '  <div class="files"></div>\n'
        '</div>\n'
    )


def memo_document(*memos) -> str:
    body = "".join(memo_block(t, c) for t, c in memos)
    return f'<html><head><title>notes</title></head><body><div class="memos">\n{body}</div></body></html>\n'


@pytest.fixture
def make_document():
    return memo_document
