"""
Output stager — make the output directory exist and be empty.

Prior artifacts are never merged with a new build: everything inside
the directory is removed, the directory itself is kept.
"""
import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def empty_dir(path: Path) -> Path:
    """
    Ensure *path* is an existing, empty directory.

    Creates it (with parents) if missing.  OS errors propagate.
    """
    if not path.exists():
        path.mkdir(parents=True)
        logger.info("Created output directory %s", path)
        return path

    removed = 0
    for child in path.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()
        removed += 1

    logger.info("Emptied output directory %s (%d entries removed)", path, removed)
    return path
