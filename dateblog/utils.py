from __future__ import annotations

import argparse
import shutil
import sys
from pathlib import Path


class BuildError(Exception):
    """A condition that aborts the whole build."""


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        raise BuildError(message)


def warn(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


def clean_output_dir(output_dir: Path, project_root: Path) -> None:
    output_resolved = output_dir.resolve()
    root_resolved = project_root.resolve()
    if output_resolved == root_resolved or root_resolved.is_relative_to(output_resolved):
        raise BuildError(f"Refusing to clean output directory containing the site root: {output_dir}")
    if output_dir.exists():
        try:
            shutil.rmtree(output_dir)
        except OSError as exc:
            raise BuildError(f"Could not remove output directory {output_dir}: {exc}") from exc
    else:
        warn(f"Output directory {output_dir} did not exist, nothing to remove.")
    try:
        output_dir.mkdir(parents=True)
    except OSError as exc:
        raise BuildError(f"Could not create output directory {output_dir}: {exc}") from exc
