"""
Catalog — hash and size every file in the finished output directory.

``node_modules`` (installed by dnt for its test run) is not part of the
published package and is skipped.
"""
import hashlib
import os
from pathlib import Path
from typing import List

from npm_release.io.schema import ArtifactEntry

SKIP_DIRS = frozenset({"node_modules"})


def hash_file(path: Path) -> str:
    """SHA-256 of a file."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def catalog_output(out_dir: Path) -> List[ArtifactEntry]:
    """Walk *out_dir* and record every file, sorted by relative path."""
    entries: List[ArtifactEntry] = []
    for root, dirs, files in os.walk(out_dir):
        dirs[:] = [d for d in dirs if d not in SKIP_DIRS]

        for filename in files:
            fpath = Path(root) / filename
            if not fpath.is_file():
                continue
            entries.append(ArtifactEntry(
                path_rel=fpath.relative_to(out_dir).as_posix(),
                sha256=hash_file(fpath),
                size_bytes=fpath.stat().st_size,
            ))
    entries.sort(key=lambda e: e.path_rel)
    return entries
