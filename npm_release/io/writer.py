"""
Writer — serialize the dnt build options to JSON.

The options file is read by the Deno driver script; it never lands in
the output directory.
"""
import json
from pathlib import Path

from npm_release.io.schema import BuildOptions


def write_build_options(options: BuildOptions, path: Path) -> Path:
    """
    Write *options* in dnt's option shape to *path*.

    Creates the parent directory if it does not exist.
    Returns *path*.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(options.to_dnt_options(), indent=2) + "\n",
        encoding="utf-8",
    )
    return path
