"""
Artifact finalizer — copy files the compiler does not produce.

Runs only after a successful build.  A missing source aborts the run and
leaves the already compiled package in the output directory as is.
"""
import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuxiliaryFile:
    """*source* relative to the project root, *destination* to the output dir."""

    source: str
    destination: str


def copy_auxiliary_files(
    files: Sequence[AuxiliaryFile],
    project_root: Path,
    out_dir: Path,
) -> List[Path]:
    """
    Copy each auxiliary file in order, overwriting existing destinations.

    Returns the written destination paths.
    Raises FileNotFoundError on the first missing source.
    """
    written: List[Path] = []
    for aux in files:
        src = project_root / aux.source
        dest = out_dir / aux.destination
        shutil.copyfile(src, dest)
        logger.info("Copied %s -> %s", src, dest)
        written.append(dest)
    return written
