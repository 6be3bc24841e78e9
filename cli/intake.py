"""Turn free-form user input into a list of candidate URLs."""

from __future__ import annotations

from typing import Iterable, List

_SCHEMES = ("http://", "https://")


def parse_url_lines(chunks: Iterable[str]) -> List[str]:
    """Split each chunk on newlines and keep trimmed lines that start with
    ``http://`` or ``https://``, preserving order and duplicates.
    """
    urls: List[str] = []
    for chunk in chunks:
        for line in chunk.splitlines():
            line = line.strip()
            if line.startswith(_SCHEMES):
                urls.append(line)
    return urls
