from __future__ import annotations

from pathlib import Path
from typing import Sequence

from .content import Post, format_display_date, output_filename, read_post_source
from .render import DEFAULT_PLACEHOLDER, render_to_file
from .utils import BuildError

INDEX_FILENAME = "index.html"


def read_optional_text(path: Path) -> str:
    """Return the file's text, or an empty string when it does not exist."""
    if not path.exists():
        return ""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildError(f"Could not read {path}: {exc}") from exc


def build_index_row(post: Post) -> str:
    return f"{format_display_date(post.date)} -- [{post.title}]({output_filename(post)})\n\n"


def build_index_markdown(posts: Sequence[Post], header: str = "", footer: str = "") -> str:
    rows = "".join(build_index_row(post) for post in posts)
    return f"{header}\n\n{rows}{footer}"


def build_index(
    template: str,
    output_dir: Path,
    posts: Sequence[Post],
    header: str = "",
    footer: str = "",
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> Path:
    index_md = build_index_markdown(posts, header, footer)
    return render_to_file(index_md, output_dir, INDEX_FILENAME, template, placeholder)


def build_posts(
    template: str,
    posts_dir: Path,
    output_dir: Path,
    posts: Sequence[Post],
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> list[Path]:
    written = []
    for post in posts:
        source = read_post_source(posts_dir, post)
        written.append(render_to_file(source, output_dir, output_filename(post), template, placeholder))
    return written
