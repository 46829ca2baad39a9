from __future__ import annotations

import datetime as dt
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from .utils import BuildError

DATE_TOKEN_FMT = "%Y%m%d"
DISPLAY_DATE_FMT = "%B %d %Y"


@dataclass(frozen=True)
class Post:
    date: str
    title: str
    source_filename: str


def parse_filename(filename: str) -> Optional[Post]:
    """Split ``"YYYYMMDD Some title.md"`` into a Post.

    The date token is kept as written; it is only checked when the index
    formats it for display.
    """
    date_token, sep, rest = filename.partition(" ")
    if not sep:
        return None
    title, dot, _ext = rest.rpartition(".")
    if not dot:
        return None
    return Post(date=date_token, title=title, source_filename=filename)


def scan_posts(posts_dir: Path) -> list[Post]:
    posts = []
    try:
        with os.scandir(posts_dir) as entries:
            for entry in entries:
                try:
                    is_file = entry.is_file(follow_symlinks=False)
                except OSError as exc:
                    raise BuildError(f"Could not determine file type of {entry.path}: {exc}") from exc
                if not is_file:
                    continue
                post = parse_filename(entry.name)
                if post is not None:
                    posts.append(post)
    except OSError as exc:
        raise BuildError(f"Could not list posts directory {posts_dir}: {exc}") from exc
    return posts


def sort_posts(posts: Iterable[Post]) -> list[Post]:
    # Filenames lead with the date, so this is newest first.
    return sorted(posts, key=lambda post: post.source_filename, reverse=True)


def output_filename(post: Post) -> str:
    return f"{post.date}-{post.title.replace(' ', '-')}.html"


def format_display_date(date_token: str) -> str:
    if len(date_token) != 8 or not (date_token.isascii() and date_token.isdigit()):
        raise BuildError(f"Invalid post date {date_token!r}, expected YYYYMMDD.")
    try:
        value = dt.datetime.strptime(date_token, DATE_TOKEN_FMT)
    except ValueError as exc:
        raise BuildError(f"Invalid post date {date_token!r}: {exc}") from exc
    return value.strftime(DISPLAY_DATE_FMT)


def read_post_source(posts_dir: Path, post: Post) -> str:
    path = posts_dir / post.source_filename
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildError(f"Could not read post {path}: {exc}") from exc
