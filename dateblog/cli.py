from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULTS, SiteConfig, load_config, resolve_path
from .content import scan_posts, sort_posts
from .pages import build_index, build_posts, read_optional_text
from .render import copy_stylesheet, read_template
from .utils import ArgumentParser, BuildError, clean_output_dir

CONFIG_NAME = "blog.toml"


def build_site(config: SiteConfig) -> list[Path]:
    """Rebuild the output directory from scratch and return the files written."""
    output_dir = config.output_dir
    clean_output_dir(output_dir, config.root)

    posts = sort_posts(scan_posts(config.posts_dir))

    template = read_template(config.template, config.placeholder)
    header = read_optional_text(config.header)
    footer = read_optional_text(config.footer)

    written = [build_index(template, output_dir, posts, header, footer, config.placeholder)]
    written.extend(build_posts(template, config.posts_dir, output_dir, posts, config.placeholder))
    written.append(copy_stylesheet(config.stylesheet, output_dir))
    return written


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    pre_parser = ArgumentParser(add_help=False)
    pre_parser.add_argument("--root", default=".")
    pre_parser.add_argument("--config", default=CONFIG_NAME)
    pre_args, _ = pre_parser.parse_known_args(argv)
    config = load_config(resolve_path(Path(pre_args.root), pre_args.config))

    def cfg_str(key: str) -> str:
        value = config.get(key)
        return DEFAULTS[key] if value is None else str(value)

    parser = ArgumentParser(description="Build a blog from dated Markdown files.")
    parser.add_argument("--root", default=pre_args.root, help="Site root; relative paths are resolved against it.")
    parser.add_argument(
        "--config",
        default=pre_args.config,
        help="Path to site config file (TOML/YAML/JSON), relative to the root.",
    )
    parser.add_argument("--posts", default=cfg_str("posts"), help="Directory containing dated Markdown posts.")
    parser.add_argument("--output", default=cfg_str("output"), help="Output directory, wiped on every build.")
    parser.add_argument("--template", default=cfg_str("template"), help="HTML template for every page.")
    parser.add_argument("--header", default=cfg_str("header"), help="Markdown shown above the post list.")
    parser.add_argument("--footer", default=cfg_str("footer"), help="Markdown shown below the post list.")
    parser.add_argument("--stylesheet", default=cfg_str("stylesheet"), help="Stylesheet copied into the output.")
    parser.add_argument(
        "--placeholder",
        default=cfg_str("placeholder"),
        help="Marker in the template replaced by the page content.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    try:
        args = parse_args(argv)
        config = SiteConfig.from_values(Path(args.root), vars(args))
        start = time.perf_counter()
        build_site(config)
    except BuildError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    elapsed = time.perf_counter() - start
    print(f"Build completed in {elapsed:.2f}s.")
    print(f"Site generated in: {config.output_dir}")
