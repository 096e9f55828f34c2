"""Rough token-count estimate for text content."""

from __future__ import annotations

import math


def estimate_tokens(content: str | bytes) -> int:
    """Estimate tokens at about four bytes per token; empty content is zero."""
    data = content.encode("utf-8") if isinstance(content, str) else content
    if not data:
        return 0
    return max(1, math.ceil(len(data) / 4))