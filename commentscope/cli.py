"""
Command line entry points.

Usage:
  commentscope suggest comments.jsonl --count 6 --explain
  commentscope serve --port 8000
  commentscope fetch "https://youtu.be/VIDEO_ID" --output comments.jsonl --max-comments 300
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

import uvicorn

from commentscope.comments import (
    SentimentScorer,
    YouTubeAPIError,
    YouTubeClient,
    clamp_max_comments,
    extract_video_id,
    load_comments,
)
from commentscope.settings import Settings
from commentscope.topics import TopicConfig, TopicSuggester


def run_suggest(path: Path, count: int, explain: bool = False) -> int:
    if not path.exists():
        print(f"Error: input file not found: {path}")
        return 1
    try:
        comments = load_comments(path)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    suggester = TopicSuggester(TopicConfig(suggestion_count=count))
    report = suggester.report(comments, count)
    print(f"Loaded {len(comments)} comments from {path}")
    if not report.suggestions:
        print("No suggestions: not enough signal in these comments.")
        return 0
    for i, title in enumerate(report.suggestions, start=1):
        print(f"{i}. {title}")
    if explain:
        for result in report.strategies:
            print(f"\n== {result.name.value} ==")
            if result.candidates is None:
                for title in result.titles:
                    print(f"  {title}")
                continue
            for key in result.selection.selected:
                cand = result.candidates.get(key)
                print(f"  {key!r:<32} {cand.kind.value:<12} covers {len(cand.coverage)}")
    return 0


def run_fetch(url: str, output: Path, max_comments: int, include_replies: bool) -> int:
    video_id = extract_video_id(url)
    if not video_id:
        print(f"Error: could not parse video ID from {url!r}")
        return 1
    settings = Settings.from_env()
    if not settings.youtube_configured:
        print("Error: YOUTUBE_API_KEY is not set")
        return 1
    client = YouTubeClient(settings.youtube_api_key, base_url=settings.youtube_api_base)
    try:
        raw = client.fetch_comments(video_id, clamp_max_comments(max_comments), include_replies)
    except YouTubeAPIError as e:
        print(f"Error: {e}")
        return 1
    analyzed = SentimentScorer().analyze_comments(raw)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as f:
        for comment in analyzed:
            f.write(json.dumps(comment.to_dict(), ensure_ascii=False) + "\n")
    print(f"Wrote {len(analyzed)} comments to {output}")
    return 0


def run_serve(host: str, port: int, reload: bool = False) -> int:
    uvicorn.run("commentscope.api.main:app", host=host, port=port, reload=reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commentscope",
        description="Suggest video topics from a comment section.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log selection steps")
    sub = parser.add_subparsers(dest="command", required=True)

    p_suggest = sub.add_parser("suggest", help="Suggest topics for a labelled JSONL corpus")
    p_suggest.add_argument("input", type=Path, help="JSONL with {text, sentiment} per line")
    p_suggest.add_argument("--count", type=int, default=6, help="Number of suggestions")
    p_suggest.add_argument("--explain", action="store_true", help="Show per-strategy picks")

    p_fetch = sub.add_parser("fetch", help="Download and label a video's comments")
    p_fetch.add_argument("url", help="YouTube video URL")
    p_fetch.add_argument("--output", type=Path, default=Path("comments.jsonl"))
    p_fetch.add_argument("--max-comments", type=int, default=100)
    p_fetch.add_argument("--include-replies", action="store_true")

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default="127.0.0.1")
    p_serve.add_argument("--port", type=int, default=8000)
    p_serve.add_argument("--reload", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.command == "suggest":
        if args.count < 0:
            print("Error: --count must be non-negative")
            return 2
        return run_suggest(args.input, args.count, args.explain)
    if args.command == "serve":
        return run_serve(args.host, args.port, args.reload)
    return run_fetch(args.url, args.output, args.max_comments, args.include_replies)


if __name__ == "__main__":
    raise SystemExit(main())
