from __future__ import annotations

import re
import shutil
from pathlib import Path

import markdown

from .utils import BuildError, warn

DEFAULT_PLACEHOLDER = "INSERT_CONTENT_HERE"

MARKDOWN_EXTENSIONS = [
    "def_list",
    "footnotes",
    "nl2br",
    "tables",
    "pymdownx.caret",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
    "pymdownx.tilde",
]
MARKDOWN_EXTENSION_CONFIGS = {
    # Only ^sup^ and ~~strike~~; no insert or subscript syntax.
    "pymdownx.caret": {"insert": False},
    "pymdownx.tilde": {"subscript": False},
}

# GFM "disallowed raw HTML" tag names.
FILTERED_TAG_RE = re.compile(
    r"<(?=/?(?:title|textarea|style|xmp|iframe|noembed|noframes|script|plaintext)(?:[\s/>]|$))",
    re.IGNORECASE,
)


def filter_tags(html_text: str) -> str:
    return FILTERED_TAG_RE.sub("&lt;", html_text)


def render_markdown(text: str) -> str:
    md = markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
    )
    return filter_tags(md.convert(text))


def render_template(template: str, content: str, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    return template.replace(placeholder, content)


def read_template(path: Path, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    if not placeholder:
        raise BuildError("Placeholder must not be empty.")
    try:
        template = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildError(f"Could not read template {path}: {exc}") from exc
    if placeholder not in template:
        warn(f"Template {path} does not contain the placeholder {placeholder!r}.")
    return template


def write_text(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise BuildError(f"Could not write {path}: {exc}") from exc


def render_to_file(
    markdown_text: str,
    output_dir: Path,
    filename: str,
    template: str,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> Path:
    path = output_dir / filename
    write_text(path, render_template(template, render_markdown(markdown_text), placeholder))
    return path


def copy_stylesheet(stylesheet: Path, output_dir: Path) -> Path:
    dest = output_dir / stylesheet.name
    try:
        shutil.copy2(stylesheet, dest)
    except OSError as exc:
        raise BuildError(f"Could not copy stylesheet {stylesheet}: {exc}") from exc
    return dest
