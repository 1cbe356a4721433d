"""URL normalization pass.

A sentence period glued to the end of a URL is replaced by a line break so
the URL keeps its exact spelling and the period scanner never sees it.
"""

from __future__ import annotations

import re
from typing import Tuple

from chat_chunker.framework import Artifact, register

_URL_WITH_PERIOD_RE = re.compile(
    r"(?P<url>https?://[^\s]+?|www\.[^\s]+?)\.(?P<after>\s|\Z)"
)


def _remove_with_count(text: str) -> Tuple[str, int]:
    return _URL_WITH_PERIOD_RE.subn(r"\g<url>\n\g<after>", text)


def remove_periods_after_urls(text: str) -> str:
    """Replace the period closing a URL with a newline."""
    return _remove_with_count(text)[0]


class _UrlNormalizePass:
    name = "url_normalize"
    input_type = str
    output_type = str

    def __call__(self, a: Artifact) -> Artifact:
        if not isinstance(a.payload, str):
            return a
        text, count = _remove_with_count(a.payload)
        return a.with_metrics(text, self.name, {"urls_trimmed": count})


url_normalize = register(_UrlNormalizePass())


__all__ = ["remove_periods_after_urls", "url_normalize"]
