from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import yaml

from .render import DEFAULT_PLACEHOLDER
from .utils import BuildError

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

DEFAULTS = {
    "posts": ".",
    "output": "site",
    "template": "template.html",
    "header": "header.md",
    "footer": "footer.md",
    "stylesheet": "style.css",
    "placeholder": DEFAULT_PLACEHOLDER,
}


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BuildError(f"Could not read config file {path}: {exc}") from exc
    if suffix == ".toml":
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            raise BuildError(f"Invalid TOML in config file {path}: {exc}") from exc
    elif suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise BuildError(f"Invalid YAML in config file {path}: {exc}") from exc
        if data is None:
            return {}
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise BuildError(f"Invalid JSON in config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise BuildError(f"Config file must be a mapping: {path}")
    return data


def resolve_path(root: Path, value: str) -> Path:
    path = Path(value)
    if not path.is_absolute():
        path = root / path
    return path


@dataclass(frozen=True)
class SiteConfig:
    root: Path
    posts_dir: Path
    output_dir: Path
    template: Path
    header: Path
    footer: Path
    stylesheet: Path
    placeholder: str = DEFAULT_PLACEHOLDER

    @classmethod
    def from_values(cls, root: Path, values: dict) -> "SiteConfig":
        """Build a config from raw values, falling back to DEFAULTS.

        Relative paths are taken relative to ``root``.
        """

        def value(key: str) -> str:
            raw = values.get(key)
            return DEFAULTS[key] if raw is None else str(raw)

        placeholder = value("placeholder")
        if not placeholder:
            raise BuildError("Placeholder must not be empty.")
        return cls(
            root=root,
            posts_dir=resolve_path(root, value("posts")),
            output_dir=resolve_path(root, value("output")),
            template=resolve_path(root, value("template")),
            header=resolve_path(root, value("header")),
            footer=resolve_path(root, value("footer")),
            stylesheet=resolve_path(root, value("stylesheet")),
            placeholder=placeholder,
        )
