"""
Load a labelled comment corpus from JSONL.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

from commentscope.topics.models import Comment, build_comments


def load_comments(path: Path) -> List[Comment]:
    """
    Read one ``{"text": ..., "sentiment": ...}`` object per line.

    Blank lines are skipped; a missing sentiment is treated as neutral.
    """
    if not path.exists():
        raise FileNotFoundError(f"comment file not found at {path}")
    records = []
    with path.open("r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"{path}:{lineno}: invalid JSON ({e.msg})") from e
            if not isinstance(obj, dict):
                raise ValueError(f"{path}:{lineno}: expected an object")
            records.append({"text": obj.get("text") or "", "sentiment": obj.get("sentiment")})
    return build_comments(records)
