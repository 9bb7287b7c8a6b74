"""
Priority merge of per-strategy title lists.
"""

from __future__ import annotations

from typing import List, Sequence


def merge_suggestions(
    result_lists: Sequence[Sequence[str]],
    count: int = 6,
) -> List[str]:
    """
    Concatenate ranked title lists in priority order and deduplicate.

    Args:
        result_lists: Title lists, highest-priority strategy first.
        count: Maximum number of titles to return.

    Returns:
        Titles in first-occurrence order, exact-string deduplicated,
        empty strings dropped, truncated to ``count``.
    """
    merged: List[str] = []
    seen: set[str] = set()
    for titles in result_lists:
        for title in titles:
            if len(merged) >= count:
                return merged
            if not title or title in seen:
                continue
            seen.add(title)
            merged.append(title)
    return merged
